import pathlib, cv2
import numpy as np

from .config import IMAGE_EXTS, THRESH_VAL
from .errors import DecodeError

ROI_COLOR = (0, 0, 255)  # BGR red


def load_gray(path):
    """Decode an image file into a grayscale grid."""
    gray = cv2.imread(str(path), cv2.IMREAD_GRAYSCALE)
    if gray is None:
        raise DecodeError(f"Cannot read image: {path}")
    return gray


def iter_images(path: pathlib.Path, recursive: bool = False):
    """Yield absolute paths to scan images under path (file or folder)."""
    path = path.resolve()
    if path.is_file():
        if path.suffix.lower() in IMAGE_EXTS:
            yield path
        return
    globber = path.rglob if recursive else path.glob
    for p in sorted(globber("*")):
        if p.suffix.lower() in IMAGE_EXTS:
            yield p


def crop(grid, rect):
    """Copy the part of ``grid`` covered by ``rect``."""
    rect.check_inside(grid.shape)
    return grid[rect.y:rect.y1, rect.x:rect.x1].copy()


def binarize(gray, thresh=THRESH_VAL, invert=False):
    """Pixels below ``thresh`` go to 0, the rest to 255 (swapped when ``invert``)."""
    mode = cv2.THRESH_BINARY_INV if invert else cv2.THRESH_BINARY
    # cv2 compares with '>', so shift the cutoff to keep ``thresh`` itself on the light side
    _, out = cv2.threshold(gray, thresh - 1, 255, mode)
    return out


def _square(size):
    return np.ones((size, size), np.uint8)


def open_(binimg, size):
    if size <= 1:
        return binimg.copy()
    return cv2.morphologyEx(binimg, cv2.MORPH_OPEN, _square(size))


def close(binimg, size):
    if size <= 1:
        return binimg.copy()
    return cv2.morphologyEx(binimg, cv2.MORPH_CLOSE, _square(size))


def encode_png(gray) -> bytes:
    """Lossless encoding handed to OCR engines."""
    ok, buf = cv2.imencode(".png", gray)
    if not ok:
        raise DecodeError("PNG encoding failed")
    return buf.tobytes()


def draw_regions(gray, rects, color=ROI_COLOR, thickness=2):
    """Copy of ``gray`` as BGR with each region outlined."""
    vis = cv2.cvtColor(gray, cv2.COLOR_GRAY2BGR)
    for r in rects:
        cv2.rectangle(vis, (r.x, r.y), (r.x1 - 1, r.y1 - 1), color, thickness)
    return vis
