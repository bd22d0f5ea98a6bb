#!/usr/bin/env python3
import argparse, logging, pathlib
from .config import MAX_WORKERS, OCR_SOURCE, SORT_CARDS
from .diag import DiskDiagnostic
from .errors import CardReaderError
from .imaging import iter_images
from .iohelpers import write_json
from .ocr import get_engine
from .pipeline import read_scans

def main(argv=None):
    ap = argparse.ArgumentParser(description="Read card names and descriptions from scans")
    ap.add_argument("scans", nargs="+", help="scan files and/or folders")
    ap.add_argument("-o", "--out", required=True, help="output .json file")
    ap.add_argument("--diag", help="folder for diagnostic images")
    ap.add_argument("--ocr", choices=["tesseract", "ai"], default=OCR_SOURCE)
    ap.add_argument("-j", "--workers", type=int, default=MAX_WORKERS)
    ap.add_argument("--sort", action=argparse.BooleanOptionalAction, default=SORT_CARDS,
                    help="order cards top-to-bottom, left-to-right")
    ap.add_argument("-r", "--recursive", action="store_true")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    inputs = []
    for s in args.scans:
        inputs.extend(iter_images(pathlib.Path(s), recursive=args.recursive))
    if not inputs:
        raise SystemExit(f"No images found at: {', '.join(args.scans)}")

    out_path = pathlib.Path(args.out).resolve()
    diag = DiskDiagnostic(pathlib.Path(args.diag).resolve()) if args.diag else None

    try:
        engine = get_engine(args.ocr)
        print(f"→ Processing {len(inputs)} scan(s)")
        found = read_scans(inputs, diag=diag, engine=engine, workers=args.workers, sort=args.sort)
        all_records = []
        for src, records in found.items():
            failed = sum(1 for r in records if not r.ok)
            print(f"  {src}: {len(records)} card(s), {failed} unreadable")
            all_records.extend(records)
        write_json(out_path, all_records)
    except (CardReaderError, ValueError) as e:
        raise SystemExit(f"error: {e}")

    print(f"Wrote: {out_path}")
    print("Done.")

if __name__ == "__main__":
    main()
