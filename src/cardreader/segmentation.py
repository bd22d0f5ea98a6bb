import logging
import cv2

from .config import CARD_CLOSE_KERNEL, CARD_OPEN_KERNEL, THRESH_VAL
from .errors import DecodeError
from .imaging import binarize, close, open_
from .regions import RegionRect

logger = logging.getLogger(__name__)


def card_mask(scan, thresh=THRESH_VAL, open_kernel=CARD_OPEN_KERNEL, close_kernel=CARD_CLOSE_KERNEL):
    """
    Binary mask with cards as foreground (255).
    Cards are darker than the background: everything below `thresh` is foreground.
    Opening drops specks, closing rejoins a card split by light artwork.
    """
    mask = open_(binarize(scan, thresh, invert=True), open_kernel)
    if close_kernel:
        mask = close(mask, close_kernel)
    return mask


def find_card_regions(scan, thresh=THRESH_VAL, open_kernel=CARD_OPEN_KERNEL,
                      close_kernel=CARD_CLOSE_KERNEL, sort=False, diag=None):
    """
    One scan-relative region per card, in contour discovery order
    (top-to-bottom then left-to-right when `sort` is set).
    """
    if scan is None or scan.ndim != 2:
        raise DecodeError("Expected a 2-D grayscale grid")
    if scan.size == 0:
        raise DecodeError("Scan has zero area")

    mask = card_mask(scan, thresh, open_kernel, close_kernel)
    if diag is not None:
        diag.card_finder_thresh(mask)

    # external contours only: holes inside a card never become cards
    cnts, _ = cv2.findContours(mask, cv2.RETR_EXTERNAL, cv2.CHAIN_APPROX_SIMPLE)
    regions = []
    for cnt in cnts:
        box = cv2.boxPoints(cv2.minAreaRect(cnt))
        region = RegionRect.from_points(box, bounds=scan.shape)
        if region is None:
            continue
        regions.append(region.check_inside(scan.shape))

    if sort:
        regions.sort(key=lambda r: (r.y, r.x))

    logger.debug("find_card_regions: %d regions from %d contours", len(regions), len(cnts))
    if diag is not None:
        diag.card_finder(scan, regions)
    return regions
