from .config import THRESH_VAL
from .imaging import binarize, encode_png
from .parsing import clean_text


def prepare_chunk(chunk, thresh=THRESH_VAL):
    # black text on white: chunks come from the grayscale card, not a mask
    return binarize(chunk, thresh)


def extract_text(chunk, role, engine, thresh=THRESH_VAL) -> str:
    """
    OCR one text region and clean the result for its role.
    Empty string means no text; engine failures raise OcrRecognitionError.
    """
    png = encode_png(prepare_chunk(chunk, thresh))
    return clean_text(engine.image_to_text(png), role)
