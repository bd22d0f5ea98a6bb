import itertools, logging, pathlib, threading
import cv2

from .imaging import draw_regions

logger = logging.getLogger(__name__)


class Diagnostic:
    """
    Hooks called by the pipeline stages. They observe intermediate results
    and must not change them. The base class does nothing.
    """

    def start_scan(self, label):
        pass

    def card_finder_thresh(self, bin_img):
        pass

    def card_finder(self, scan, regions):
        pass

    def text_chunks(self, card, chunks, index):
        pass

    def text_blocks_thresh(self, bin_img):
        pass

    def card_reading(self, index, record):
        pass


class DiskDiagnostic(Diagnostic):
    """
    Writes intermediate images to `output_path`. Files of one scan share the
    prefix given to start_scan; per-card files carry the card index.
    """

    def __init__(self, output_path):
        self.output_path = pathlib.Path(output_path)
        self.prefix = ""
        # exploratory text-block hooks have no card index
        self._lock = threading.Lock()
        self._block_count = itertools.count()

    def _write(self, name, img):
        self.output_path.mkdir(parents=True, exist_ok=True)
        path = self.output_path / f"{self.prefix}{name}"
        cv2.imwrite(str(path), img)
        logger.debug("diag: wrote %s", path)
        return path

    def start_scan(self, label):
        self.prefix = f"{label}_" if label else ""

    def card_finder_thresh(self, bin_img):
        self._write("diag_bin.png", bin_img)

    def card_finder(self, scan, regions):
        self._write("diag_card_region.png", draw_regions(scan, regions))

    def text_chunks(self, card, chunks, index):
        self._write(f"text_chunks_{index}.png", draw_regions(card, [chunks.name, chunks.description]))

    def text_blocks_thresh(self, bin_img):
        with self._lock:
            n = next(self._block_count)
        self._write(f"text_blocks_{n}.png", bin_img)

    def card_reading(self, index, record):
        if record.ok:
            logger.info("%scard %d: %r", self.prefix, index, record.name)
        else:
            logger.warning("%scard %d unreadable: %s", self.prefix, index, record.error)
