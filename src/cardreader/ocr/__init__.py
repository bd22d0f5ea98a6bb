"""OCR engine adapters."""

from ..config import OCR_SOURCE
from .base import OcrEngine  # noqa: F401


def get_engine(source=OCR_SOURCE, **kwargs) -> OcrEngine:
    """Build the engine named by ``source`` ("tesseract" or "ai").

    Raises OcrEngineInitError when the engine cannot be used at all.
    """
    source = (source or "").strip().lower()
    if source == "tesseract":
        from .tesseract import TesseractEngine
        return TesseractEngine(**kwargs)
    if source == "ai":
        from .ai import AiEngine
        return AiEngine(**kwargs)
    raise ValueError(f"Unknown OCR source: {source!r}")
