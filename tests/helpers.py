"""Synthetic scans and a stub OCR engine for the pipeline tests."""

import io
from typing import Callable, List, Optional, Sequence, Tuple

import cv2
import numpy as np
from PIL import Image

from cardreader.ocr.base import OcrEngine
from cardreader.regions import RegionRect

Rect = Tuple[int, int, int, int]  # (x, y, w, h)


def make_scan(
    size: Tuple[int, int], cards: Sequence[Rect], background: int = 255, fill: int = 120
) -> np.ndarray:
    """White (by default) scan of ``size`` = (width, height) with filled card rectangles."""
    width, height = size
    scan = np.full((height, width), background, dtype=np.uint8)
    for x, y, w, h in cards:
        scan[y : y + h, x : x + w] = fill
    return scan


def contains(outer: RegionRect, inner: RegionRect) -> bool:
    return (
        outer.x <= inner.x and outer.y <= inner.y and inner.x1 <= outer.x1 and inner.y1 <= outer.y1
    )


def as_ratio(rect: RegionRect, shape) -> Tuple[float, float, float, float]:
    """(x0, y0, x1, y1) of ``rect`` as fractions of a grid of ``shape``."""
    h, w = shape[:2]
    return (rect.x / w, rect.y / h, rect.x1 / w, rect.y1 / h)


# card-relative panels enclosing the name and description regions of a 745x1040 card
NAME_PANEL = (100, 30, 645, 135)
DESCRIPTION_PANEL = (50, 680, 695, 970)


def make_text_card(name: str = "Test", description: str = "Hello world", frame: int = 90) -> np.ndarray:
    """Dark 745x1040 card with light text panels and black lettering drawn in them."""
    card = np.full((1040, 745), frame, dtype=np.uint8)
    for x0, y0, x1, y1 in (NAME_PANEL, DESCRIPTION_PANEL):
        card[y0:y1, x0:x1] = 230
    if name:
        cv2.putText(card, name, (140, 100), cv2.FONT_HERSHEY_SIMPLEX, 1.5, 0, 3)
    if description:
        cv2.putText(card, description, (90, 780), cv2.FONT_HERSHEY_SIMPLEX, 1.5, 0, 3)
    return card


def place(scan: np.ndarray, card: np.ndarray, x: int, y: int) -> np.ndarray:
    h, w = card.shape[:2]
    scan[y : y + h, x : x + w] = card
    return scan


def png_size(png: bytes) -> Tuple[int, int]:
    with Image.open(io.BytesIO(png)) as img:
        return img.size


def has_ink(png: bytes) -> bool:
    """True if the (binarized) image has any black pixel."""
    with Image.open(io.BytesIO(png)) as img:
        return bool((np.asarray(img.convert("L")) == 0).any())


class StubEngine(OcrEngine):
    """Answers from the shape of the image: wide strips are names, the rest descriptions."""

    def __init__(
        self,
        name: str = "Test\nsome garbage\n",
        description: str = "Hello\nworld\n",
        answer: Optional[Callable[[bytes], str]] = None,
        needs_ink: bool = False,
    ) -> None:
        self.name = name
        self.description = description
        self.answer = answer
        # only "read" images that actually carry lettering
        self.needs_ink = needs_ink
        self.calls: List[bytes] = []

    def image_to_text(self, png: bytes) -> str:
        self.calls.append(png)
        if self.answer is not None:
            return self.answer(png)
        if self.needs_ink and not has_ink(png):
            return ""
        w, h = png_size(png)
        return self.name if w > 4 * h else self.description


class RecordingDiag:
    """Diagnostic sink that keeps every call."""

    def __init__(self) -> None:
        self.calls: List[tuple] = []

    def card_finder_thresh(self, bin_img) -> None:
        self.calls.append(("card_finder_thresh", bin_img))

    def card_finder(self, scan, regions) -> None:
        self.calls.append(("card_finder", scan, list(regions)))

    def start_scan(self, label) -> None:
        self.calls.append(("start_scan", label))

    def text_chunks(self, card, chunks, index) -> None:
        self.calls.append(("text_chunks", card, chunks, index))

    def text_blocks_thresh(self, bin_img) -> None:
        self.calls.append(("text_blocks_thresh", bin_img))

    def card_reading(self, index, record) -> None:
        self.calls.append(("card_reading", index, record))

    def names(self) -> List[str]:
        return [c[0] for c in self.calls]
