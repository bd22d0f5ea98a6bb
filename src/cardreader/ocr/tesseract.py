import io, logging
import pytesseract
from PIL import Image, UnidentifiedImageError

from ..config import OCR_TIMEOUT, TESS_LANGS, TESS_OEM, TESS_PSM
from ..errors import OcrEngineInitError, OcrRecognitionError
from .base import OcrEngine

logger = logging.getLogger(__name__)


def _tess_config(psm=TESS_PSM, oem=TESS_OEM):
    config = f"--oem {oem} --psm {psm}"
    return config


class TesseractEngine(OcrEngine):
    """Tesseract through pytesseract. Checks binary and language data up front."""

    def __init__(self, lang=TESS_LANGS, psm=TESS_PSM, oem=TESS_OEM, timeout=OCR_TIMEOUT):
        self.lang = lang
        self.config = _tess_config(psm=psm, oem=oem)
        self.timeout = timeout or 0
        try:
            version = pytesseract.get_tesseract_version()
            available = set(pytesseract.get_languages(config=""))
        except pytesseract.TesseractNotFoundError as e:
            raise OcrEngineInitError("tesseract is not installed or not on PATH") from e
        except (pytesseract.TesseractError, OSError) as e:
            raise OcrEngineInitError(f"tesseract failed to start: {e}") from e

        missing = [code for code in lang.split("+") if code not in available]
        if missing:
            raise OcrEngineInitError(f"missing tesseract language data: {', '.join(missing)}")
        logger.debug("tesseract %s ready (lang=%s, %s)", version, lang, self.config)

    def image_to_text(self, png: bytes) -> str:
        try:
            img = Image.open(io.BytesIO(png))
            img.load()
        except (UnidentifiedImageError, OSError) as e:
            raise OcrRecognitionError(f"unreadable OCR input: {e}") from e
        try:
            return pytesseract.image_to_string(img, lang=self.lang, config=self.config, timeout=self.timeout)
        except RuntimeError as e:
            # TesseractError subclasses RuntimeError; timeouts raise a bare one
            raise OcrRecognitionError(f"tesseract failed: {e}") from e
