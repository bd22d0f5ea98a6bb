import logging, pathlib
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List

from .config import MAX_WORKERS, SORT_CARDS, THRESH_VAL
from .crops import locate_text_chunks
from .errors import OcrRecognitionError
from .imaging import crop, load_gray
from .ocr import get_engine
from .regions import CardRecord, TextRole
from .segmentation import find_card_regions
from .text import extract_text

logger = logging.getLogger(__name__)


def read_card(scan, rect, engine, diag=None, index=0, thresh=THRESH_VAL) -> CardRecord:
    """Read name and description of the card at ``rect`` (scan coordinates).

    OCR failures are scoped to this card and come back as a record with
    ``error`` set. Geometry errors propagate.
    """
    card = crop(scan, rect)
    chunks = locate_text_chunks(card, diag=diag, index=index)
    name_img = crop(card, chunks.name)
    desc_img = crop(card, chunks.description)

    try:
        record = CardRecord(
            name=extract_text(name_img, TextRole.NAME, engine, thresh=thresh),
            description=extract_text(desc_img, TextRole.DESCRIPTION, engine, thresh=thresh),
        )
    except OcrRecognitionError as e:
        logger.warning("card %d at %s: %s", index, rect.as_xywh(), e)
        record = CardRecord(name="", description="", error=str(e))

    if diag is not None:
        diag.card_reading(index, record)
    return record


def read_batch(scan, diag=None, engine=None, workers=MAX_WORKERS, sort=SORT_CARDS) -> List[CardRecord]:
    """
    Extract card records from a scan of cards.
    1. find card regions on the scan
    2. read each card (locate text chunks, OCR them), possibly in parallel
    Output order is region order whatever the completion order.
    """
    if engine is None:
        engine = get_engine()

    regions = find_card_regions(scan, sort=sort, diag=diag)
    if not regions:
        logger.info("no cards found")
        return []

    def _read(item):
        idx, rect = item
        return read_card(scan, rect, engine, diag=diag, index=idx)

    workers = max(1, min(int(workers or 1), len(regions)))
    if workers == 1:
        return [_read(item) for item in enumerate(regions)]

    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(_read, enumerate(regions)))


def read_scans(paths, diag=None, engine=None, workers=MAX_WORKERS, sort=SORT_CARDS) -> Dict[str, List[CardRecord]]:
    """
    Read several scan files with one shared OCR engine.
    Keyed by resolved path, so same-named scans from different folders stay apart.
    """
    if engine is None:
        engine = get_engine()
    results = {}
    for i, p in enumerate(paths):
        p = pathlib.Path(p).resolve()
        scan = load_gray(p)
        if diag is not None:
            diag.start_scan(f"{i:03d}_{p.stem}")
        key = str(p)
        results[key] = read_batch(scan, diag=diag, engine=engine, workers=workers, sort=sort)
        logger.debug("%s: %d cards", key, len(results[key]))
    return results
