import logging
import cv2

from .config import (
    DESCRIPTION_REF_RECT, NAME_REF_RECT, REFERENCE_CARD_SIZE,
    TEXT_CLOSE_KERNEL, TEXT_MIN_AREA, THRESH_VAL,
)
from .imaging import binarize, close
from .regions import RegionRect, TextChunks

logger = logging.getLogger(__name__)


def ratio_box(ref_rect, ref_size=REFERENCE_CARD_SIZE):
    """(x, y, w, h) measured on the reference card -> (x0, y0, x1, y1) fractions."""
    x, y, w, h = ref_rect
    rw, rh = ref_size
    return (x / rw, y / rh, (x + w) / rw, (y + h) / rh)


NAME_BOX = ratio_box(NAME_REF_RECT)
DESCRIPTION_BOX = ratio_box(DESCRIPTION_REF_RECT)


def _rect_rel(parent_shape, rel):
    ph, pw = parent_shape[:2]
    x0, y0, x1, y1 = rel
    X0, Y0 = int(x0*pw), int(y0*ph)
    X1, Y1 = int(round(x1*pw)), int(round(y1*ph))
    X0, Y0 = max(0, min(X0, pw - 1)), max(0, min(Y0, ph - 1))
    X1, Y1 = min(pw, max(X1, X0 + 1)), min(ph, max(Y1, Y0 + 1))
    return RegionRect(X0, Y0, X1 - X0, Y1 - Y0).check_inside(parent_shape)


def locate_text_chunks(card, name_box=NAME_BOX, description_box=DESCRIPTION_BOX, diag=None, index=0):
    """
    Name and description regions of a card sub-image, by fixed layout ratios.
    Handles uniform scaling only: a rotated, skewed or differently
    proportioned card gets misplaced regions.
    """
    chunks = TextChunks(
        name=_rect_rel(card.shape, name_box),
        description=_rect_rel(card.shape, description_box),
    )
    if diag is not None:
        diag.text_chunks(card, chunks, index)
    return chunks


def find_text_blocks(card, thresh=THRESH_VAL, close_kernel=TEXT_CLOSE_KERNEL,
                     min_area=TEXT_MIN_AREA, diag=None):
    """
    Experimental layout detection: merge letters into solid blocks and return
    their boxes, top to bottom. Not used by read_batch; the fixed ratios are.
    """
    # dark ink becomes foreground so closing fuses neighbouring glyphs
    bin_img = close(binarize(card, thresh, invert=True), close_kernel)
    if diag is not None:
        diag.text_blocks_thresh(bin_img)

    cnts, _ = cv2.findContours(bin_img, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)
    blocks = []
    for cnt in cnts:
        x, y, w, h = cv2.boundingRect(cnt)
        if w * h < min_area:
            continue
        blocks.append(RegionRect(x, y, w, h).check_inside(card.shape))
    logger.debug("find_text_blocks: %d of %d blobs kept", len(blocks), len(cnts))
    return sorted(blocks, key=lambda r: (r.y, r.x))
