import itertools

import pytest

from pzmap.rectpack.finder import (
    BinDimension,
    CallbackResult,
    FinderInput,
    best_packing_for_ordering,
    best_packing_for_ordering_impl,
    find_best_packing,
    find_best_packing_dont_sort,
    find_best_packing_impl,
    pack_rectangles,
)
from pzmap.rectpack.spaces import EmptySpaces, FlippingOption
from pzmap.rectpack.structs import RectWH, RectXYWH, RectXYWHF


def _overlaps(a, b):
    return (
        a.x < b.x + b.w
        and b.x < a.x + a.w
        and a.y < b.y + b.h
        and b.y < a.y + a.h
    )


def _assert_valid_packing(rects, aabb):
    for rect in rects:
        assert rect.x >= 0 and rect.y >= 0
        assert rect.x + rect.w <= aabb.w
        assert rect.y + rect.h <= aabb.h
    for a, b in itertools.combinations(rects, 2):
        assert not _overlaps(a, b)


def test_single_rectangle_fills_atlas_exactly():
    rect = RectXYWH(0, 0, 10, 20)
    size = pack_rectangles([rect])
    assert size == RectWH(10, 20)
    assert (rect.x, rect.y, rect.w, rect.h) == (0, 0, 10, 20)


def test_many_rectangles_do_not_overlap():
    rects = [RectXYWH(0, 0, w, h) for w, h in [(10, 10), (20, 5), (7, 30), (15, 15), (3, 3), (40, 8)]]
    total_area = sum(r.area() for r in rects)
    size = pack_rectangles(rects)
    _assert_valid_packing(rects, size)
    assert size.area() >= total_area


def test_sizes_kept_after_packing():
    sizes = [(12, 4), (4, 12), (8, 8), (16, 2)]
    rects = [RectXYWH(0, 0, w, h) for w, h in sizes]
    pack_rectangles(rects)
    assert [(r.w, r.h) for r in rects] == sizes


def test_too_big_rectangle_is_not_placed():
    rect = RectXYWH(0, 0, 100, 100)
    size = pack_rectangles([rect], max_side=50)
    assert size == RectWH(0, 0)
    assert (rect.x, rect.y) == (0, 0)


def test_zero_area_rectangles_are_skipped():
    empty = RectXYWH(5, 5, 0, 7)
    full = RectXYWH(0, 0, 6, 6)
    size = pack_rectangles([empty, full])
    assert (empty.x, empty.y) == (5, 5)
    assert size == RectWH(6, 6)


def test_impl_success_returns_bin_that_holds_rectangle():
    root = EmptySpaces(RectWH())
    result = best_packing_for_ordering_impl(
        root, [RectXYWH(0, 0, 4, 4)], RectWH(64, 64), 1, BinDimension.BOTH
    )
    assert isinstance(result, RectWH)
    assert result.w >= 4 and result.h >= 4
    assert result.area() <= 64 * 64


def test_impl_failure_returns_inserted_area():
    root = EmptySpaces(RectWH())
    ordering = [RectXYWH(0, 0, 10, 10), RectXYWH(0, 0, 100, 100)]
    result = best_packing_for_ordering_impl(
        root, ordering, RectWH(64, 64), 1, BinDimension.BOTH
    )
    assert result == ordering[0].area()


@pytest.mark.parametrize("dimension", [BinDimension.WIDTH, BinDimension.HEIGHT])
def test_impl_single_dimension_keeps_other_side(dimension):
    root = EmptySpaces(RectWH())
    start = RectWH(32, 32)
    result = best_packing_for_ordering_impl(
        root, [RectXYWH(0, 0, 5, 5)], start, 1, dimension
    )
    assert isinstance(result, RectWH)
    if dimension is BinDimension.WIDTH:
        assert result.h == start.h
        assert 5 <= result.w <= start.w
    else:
        assert result.w == start.w
        assert 5 <= result.h <= start.h


def test_best_packing_for_ordering_no_larger_than_start():
    root = EmptySpaces(RectWH())
    ordering = [RectXYWH(0, 0, 8, 3), RectXYWH(0, 0, 3, 8)]
    result = best_packing_for_ordering(root, ordering, RectWH(128, 128), -4)
    assert isinstance(result, RectWH)
    assert result.w <= 128 and result.h <= 128
    assert result.area() >= sum(r.area() for r in ordering)


def test_best_packing_for_ordering_failure():
    root = EmptySpaces(RectWH())
    result = best_packing_for_ordering(
        root, [RectXYWH(0, 0, 200, 1)], RectWH(64, 64), 1
    )
    assert result == 0


def test_callbacks_report_every_placement():
    placed = []
    rejected = []

    def on_success(rect):
        placed.append(rect)
        return CallbackResult.CONTINUE_PACKING

    def on_failure(rect):
        rejected.append(rect)
        return CallbackResult.CONTINUE_PACKING

    rects = [RectXYWH(0, 0, 4, 4) for _ in range(5)]
    finder_input = FinderInput(256, 1, on_success, on_failure, FlippingOption.DISABLED)
    size = find_best_packing(rects, finder_input)
    assert len(placed) == len(rects)
    assert rejected == []
    _assert_valid_packing(rects, size)


def test_abort_after_first_placement():
    rects = [RectXYWH(99, 99, 4, 4), RectXYWH(99, 99, 4, 4)]
    finder_input = FinderInput(
        64,
        1,
        lambda rect: CallbackResult.ABORT_PACKING,
        lambda rect: CallbackResult.ABORT_PACKING,
    )
    size = find_best_packing_dont_sort(rects, finder_input)
    assert size == RectWH(4, 4)
    assert (rects[0].x, rects[0].y) == (0, 0)
    assert (rects[1].x, rects[1].y) == (99, 99)


def test_dont_sort_with_flipping():
    rects = [RectXYWHF(0, 0, w, h) for w, h in [(30, 5), (5, 30), (10, 10), (20, 4)]]
    areas = sorted(r.area() for r in rects)
    finder_input = FinderInput(512, -2, flipping_mode=FlippingOption.ENABLED)
    size = find_best_packing_dont_sort(rects, finder_input, allow_flip=True)
    _assert_valid_packing(rects, size)
    assert sorted(r.area() for r in rects) == areas


def test_custom_key_orders():
    rects = [RectXYWH(0, 0, w, h) for w, h in [(9, 2), (2, 9), (5, 5)]]
    finder_input = FinderInput(128, 1)
    size = find_best_packing(rects, finder_input, lambda r: r.w, lambda r: r.h)
    _assert_valid_packing(rects, size)
    assert size.area() >= sum(r.area() for r in rects)


def test_impl_without_orders_raises():
    with pytest.raises(ValueError):
        find_best_packing_impl([], FinderInput(64, 1))