import os
from dotenv import load_dotenv
load_dotenv()


def _env(name, default, cast=str):
    raw = os.getenv(f"CARDREADER_{name}")
    if raw is None or raw.strip() == "":
        return default
    if cast is bool:
        return raw.strip().lower() in {"1", "true", "yes", "on"}
    return cast(raw)


OCR_SOURCE = _env("OCR_SOURCE", "tesseract")   # "tesseract" | "ai"
AI_MODEL   = _env("AI_MODEL", "gpt-4.1-mini")

TESS_LANGS  = _env("TESS_LANGS", "eng")
TESS_PSM    = _env("TESS_PSM", 6, int)
TESS_OEM    = _env("TESS_OEM", 1, int)
OCR_TIMEOUT = _env("OCR_TIMEOUT", 0, float)     # seconds per chunk, 0 = no limit

THRESH_VAL        = _env("THRESH_VAL", 200, int)      # light background cutoff (0-255)
CARD_OPEN_KERNEL  = _env("CARD_OPEN_KERNEL", 15, int)
CARD_CLOSE_KERNEL = _env("CARD_CLOSE_KERNEL", 15, int)  # 0 disables the closing pass
TEXT_CLOSE_KERNEL = _env("TEXT_CLOSE_KERNEL", 20, int)
TEXT_MIN_AREA     = _env("TEXT_MIN_AREA", 100, int)

MAX_WORKERS = _env("MAX_WORKERS", os.cpu_count() or 1, int)
SORT_CARDS  = _env("SORT_CARDS", False, bool)

# Calibration measured on one reference card scanned at 300 DPI.
# Rects are (x, y, width, height) in reference pixels.
REFERENCE_CARD_SIZE  = (745, 1040)   # (width, height)
NAME_REF_RECT        = (120, 45, 505, 75)
DESCRIPTION_REF_RECT = (70, 700, 605, 250)

IMAGE_EXTS = {".jpg", ".jpeg", ".png", ".tif", ".tiff", ".bmp"}
