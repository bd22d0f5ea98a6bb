import cv2
import numpy as np
import pytest

from cardreader.config import DESCRIPTION_REF_RECT, NAME_REF_RECT, REFERENCE_CARD_SIZE
from cardreader.crops import find_text_blocks, locate_text_chunks, ratio_box
from cardreader.regions import RegionRect

from helpers import RecordingDiag, as_ratio


def _card(width: int, height: int) -> np.ndarray:
    return np.full((height, width), 180, dtype=np.uint8)


def test_reference_card_gets_reference_rects():
    w, h = REFERENCE_CARD_SIZE
    chunks = locate_text_chunks(_card(w, h))

    for got, expected in ((chunks.name, NAME_REF_RECT), (chunks.description, DESCRIPTION_REF_RECT)):
        for a, b in zip(got.as_xywh(), expected):
            assert abs(a - b) <= 1


def test_ratio_box_is_fractional_corners():
    assert ratio_box((10, 20, 30, 40), (100, 200)) == (0.1, 0.1, 0.4, 0.3)


def test_scale_invariance():
    w, h = REFERENCE_CARD_SIZE
    small = _card(w, h)
    large = cv2.resize(small, (w * 2, h * 2), interpolation=cv2.INTER_NEAREST)

    a = locate_text_chunks(small)
    b = locate_text_chunks(large)
    for ra, rb, shape_a, shape_b in (
        (a.name, b.name, small.shape, large.shape),
        (a.description, b.description, small.shape, large.shape),
    ):
        assert as_ratio(ra, shape_a) == pytest.approx(as_ratio(rb, shape_b), abs=0.005)


@pytest.mark.parametrize("size", [(745, 1040), (300, 420), (1200, 1600), (7, 9), (64, 32)])
def test_regions_fit_inside_card(size):
    card = _card(*size)
    chunks = locate_text_chunks(card)

    for r in (chunks.name, chunks.description):
        assert r.width > 0 and r.height > 0
        assert r.fits_in(card.shape)


def test_name_is_above_description():
    chunks = locate_text_chunks(_card(745, 1040))
    assert chunks.name.y1 <= chunks.description.y


def test_locate_reports_to_diagnostics():
    card = _card(745, 1040)
    diag = RecordingDiag()
    chunks = locate_text_chunks(card, diag=diag, index=4)

    assert diag.names() == ["text_chunks"]
    assert diag.calls[0][1] is card
    assert diag.calls[0][2:] == (chunks, 4)


def _text_line(card, x, y, glyphs, w=10, h=20, gap=6):
    for i in range(glyphs):
        gx = x + i * (w + gap)
        card[y : y + h, gx : gx + w] = 30


def test_find_text_blocks_merges_glyphs_into_lines():
    card = np.full((600, 400), 235, dtype=np.uint8)
    _text_line(card, 40, 300, 12)
    _text_line(card, 40, 50, 16)
    diag = RecordingDiag()

    blocks = find_text_blocks(card, diag=diag)

    assert len(blocks) == 2
    top, bottom = blocks
    assert top.y < bottom.y
    assert abs(top.y - 50) <= 2 and abs(bottom.y - 300) <= 2
    assert top.width > 200  # all 16 glyphs in one block
    assert diag.names() == ["text_blocks_thresh"]


def test_find_text_blocks_drops_small_blobs():
    card = np.full((200, 200), 235, dtype=np.uint8)
    card[100:103, 100:103] = 0
    assert find_text_blocks(card, min_area=100) == []


def test_find_text_blocks_blank_card():
    assert find_text_blocks(np.full((100, 80), 255, dtype=np.uint8)) == []


def test_blocks_are_region_rects():
    card = np.full((200, 300), 235, dtype=np.uint8)
    _text_line(card, 20, 20, 5)
    blocks = find_text_blocks(card)
    assert blocks and all(isinstance(b, RegionRect) for b in blocks)
