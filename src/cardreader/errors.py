"""Error types raised by the card reading pipeline."""


class CardReaderError(Exception):
    """Base class for every error raised by cardreader."""


class DecodeError(CardReaderError):
    """The input could not be turned into a usable grayscale grid."""


class RegionOutOfBounds(CardReaderError):
    """A region does not lie fully inside the grid it is applied to."""


class OcrEngineInitError(CardReaderError):
    """The OCR engine cannot be used at all (missing binary, language data, credentials)."""


class OcrRecognitionError(CardReaderError):
    """Recognition failed for a single image; other images may still succeed."""
