"""Searching for the smallest bin that holds a set of rectangles."""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Callable

from pzmap.rectpack.spaces import EmptySpaces, FlippingOption
from pzmap.rectpack.structs import RectWH


class CallbackResult(Enum):
    """What a placement callback asks the packer to do next."""

    ABORT_PACKING = 0
    CONTINUE_PACKING = 1


class BinDimension(Enum):
    """Which sides of the bin a search shrinks."""

    BOTH = 0
    WIDTH = 1
    HEIGHT = 2


def _continue_packing(rect):
    return CallbackResult.CONTINUE_PACKING


@dataclass
class FinderInput:
    """Limits of the search and callbacks run for each final placement."""

    max_bin_side: int
    discard_step: int
    handle_successful_insertion: Callable = _continue_packing
    handle_unsuccessful_insertion: Callable = _continue_packing
    flipping_mode: FlippingOption = FlippingOption.DISABLED


def _try_insert_all(root, ordering):
    """Insert rectangles in order; return (all inserted, area inserted)."""
    total_inserted_area = 0
    for rect in ordering:
        if root.insert(rect.get_wh()) is None:
            return False, total_inserted_area
        total_inserted_area += rect.area()
    return True, total_inserted_area


def best_packing_for_ordering_impl(
    root, ordering, starting_bin, discard_step, tried_dimension
):
    """Binary-search bin sizes no larger than ``starting_bin`` along one dimension.

    Returns the smallest viable bin as a RectWH, or, when even the starting
    bin cannot hold every rectangle, the total area inserted as an int.
    """
    candidate = RectWH(starting_bin.w, starting_bin.h)
    tries_before_discarding = 0

    if discard_step <= 0:
        tries_before_discarding = -discard_step
        discard_step = 1

    if tried_dimension is BinDimension.BOTH:
        candidate.w //= 2
        candidate.h //= 2
        step = candidate.w // 2
    elif tried_dimension is BinDimension.WIDTH:
        candidate.w //= 2
        step = candidate.w // 2
    else:
        candidate.h //= 2
        step = candidate.h // 2

    while True:
        root.reset(candidate)
        all_inserted, total_inserted_area = _try_insert_all(root, ordering)

        if all_inserted:
            if step <= discard_step:
                if tries_before_discarding > 0:
                    tries_before_discarding -= 1
                else:
                    return RectWH(candidate.w, candidate.h)

            if tried_dimension is BinDimension.BOTH:
                candidate.w -= step
                candidate.h -= step
            elif tried_dimension is BinDimension.WIDTH:
                candidate.w -= step
            else:
                candidate.h -= step

            root.reset(candidate)
        else:
            if tried_dimension is BinDimension.BOTH:
                candidate.w += step
                candidate.h += step
                if candidate.area() > starting_bin.area():
                    return total_inserted_area
            elif tried_dimension is BinDimension.WIDTH:
                candidate.w += step
                if candidate.w > starting_bin.w:
                    return total_inserted_area
            else:
                candidate.h += step
                if candidate.h > starting_bin.h:
                    return total_inserted_area

        step = max(1, step // 2)


def best_packing_for_ordering(root, ordering, starting_bin, discard_step):
    """Find the best bin for one ordering, shrinking both sides, then each alone.

    Returns a RectWH on success or the inserted area (int) on failure.
    """
    ordering = list(ordering)
    best = best_packing_for_ordering_impl(
        root, ordering, starting_bin, discard_step, BinDimension.BOTH
    )
    if not isinstance(best, RectWH):
        return best

    for dimension in (BinDimension.WIDTH, BinDimension.HEIGHT):
        trial = best_packing_for_ordering_impl(
            root, ordering, best, discard_step, dimension
        )
        if isinstance(trial, RectWH):
            best = trial

    return best


def _assign(target, source):
    for item in fields(source):
        setattr(target, item.name, getattr(source, item.name))


def find_best_packing_impl(orders, finder_input, allow_flip=False):
    """Pick the ordering that packs best, place its rectangles and return the bin.

    The rectangles of the chosen ordering are moved in place to where they
    were packed; the returned RectWH bounds everything that was placed.
    """
    max_bin = RectWH(finder_input.max_bin_side, finder_input.max_bin_side)
    best_order = None
    best_total_inserted = -1
    best_bin = RectWH(max_bin.w, max_bin.h)

    root = EmptySpaces(RectWH(), allow_flip)
    root.flipping_mode = finder_input.flipping_mode

    for order in orders:
        order = list(order)
        packing = best_packing_for_ordering(
            root, order, max_bin, finder_input.discard_step
        )

        if isinstance(packing, RectWH):
            if packing.area() <= best_bin.area():
                best_order = order
                best_bin = packing
        elif best_order is None and packing > best_total_inserted:
            best_order = order
            best_total_inserted = packing

    if best_order is None:
        raise ValueError("no orderings to pack")

    root.reset(best_bin)

    for rect in best_order:
        placed = root.insert(rect.get_wh())
        if placed is not None:
            _assign(rect, placed)
            result = finder_input.handle_successful_insertion(rect)
        else:
            result = finder_input.handle_unsuccessful_insertion(rect)
        if result is CallbackResult.ABORT_PACKING:
            break

    return root.get_rects_aabb()


def find_best_packing_dont_sort(subjects, finder_input, allow_flip=False):
    """Pack the rectangles only in the order they are given."""
    return find_best_packing_impl([list(subjects)], finder_input, allow_flip)


_DEFAULT_KEYS = (
    lambda r: r.area(),
    lambda r: r.perimeter(),
    lambda r: max(r.w, r.h),
    lambda r: r.w,
    lambda r: r.h,
)


def find_best_packing(subjects, finder_input, *keys, allow_flip=False):
    """Pack the rectangles, trying one ordering per key function.

    Each key orders the rectangles from largest to smallest value. Without
    keys, orderings by area, perimeter, longest side, width and height are
    tried. Rectangles of zero area are left untouched.
    """
    if not keys:
        keys = _DEFAULT_KEYS
    valid = [rect for rect in subjects if rect.area() != 0]
    orders = [sorted(valid, key=key, reverse=True) for key in keys]
    return find_best_packing_impl(orders, finder_input, allow_flip)


def _abort_packing(rect):
    return CallbackResult.ABORT_PACKING


def pack_rectangles(rectangles, max_side=8192, discard_step=-4):
    """Pack RectXYWH rectangles in place without rotation; return the atlas size."""
    finder_input = FinderInput(
        max_bin_side=max_side,
        discard_step=discard_step,
        handle_successful_insertion=_continue_packing,
        handle_unsuccessful_insertion=_abort_packing,
        flipping_mode=FlippingOption.DISABLED,
    )
    return find_best_packing(rectangles, finder_input, allow_flip=False)