"""Read card names and descriptions from scans of cards.

Pipeline: find card regions on the scan, locate the name and description
regions on each card, OCR them.
"""

from .crops import find_text_blocks, locate_text_chunks  # noqa: F401
from .diag import Diagnostic, DiskDiagnostic  # noqa: F401
from .errors import (  # noqa: F401
    CardReaderError,
    DecodeError,
    OcrEngineInitError,
    OcrRecognitionError,
    RegionOutOfBounds,
)
from .imaging import crop, load_gray  # noqa: F401
from .pipeline import read_batch, read_card, read_scans  # noqa: F401
from .regions import CardRecord, RegionRect, TextChunks, TextRole  # noqa: F401
from .segmentation import find_card_regions  # noqa: F401
from .text import extract_text  # noqa: F401
