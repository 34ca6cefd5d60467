"""Free-space bookkeeping for packing rectangles into a bin."""

from enum import Enum

from pzmap.rectpack.splits import insert_and_split
from pzmap.rectpack.structs import RectWH, RectXYWH, RectXYWHF


class FlippingOption(Enum):
    """Whether rectangles may be rotated to fit."""

    DISABLED = 0
    ENABLED = 1


class DefaultEmptySpaces:
    """An unbounded collection of empty spaces."""

    def __init__(self):
        self._spaces = []

    def remove(self, index):
        """Remove a space by moving the last one into its slot."""
        last = self._spaces.pop()
        if index < len(self._spaces):
            self._spaces[index] = last

    def add(self, space):
        self._spaces.append(space)
        return True

    def __len__(self):
        return len(self._spaces)

    def reset(self):
        self._spaces.clear()

    def __getitem__(self, index):
        return self._spaces[index]


class StaticEmptySpaces:
    """A collection of empty spaces that holds at most ``max_spaces``."""

    def __init__(self, max_spaces):
        self.max_spaces = max_spaces
        self._spaces = []

    def remove(self, index):
        """Remove a space by moving the last one into its slot."""
        last = self._spaces.pop()
        if index < len(self._spaces):
            self._spaces[index] = last

    def add(self, space):
        """Add a space; return False when the collection is full."""
        if len(self._spaces) >= self.max_spaces:
            return False
        self._spaces.append(space)
        return True

    def __len__(self):
        return len(self._spaces)

    def reset(self):
        self._spaces.clear()

    def __getitem__(self, index):
        return self._spaces[index]


class EmptySpaces:
    """Tracks the free areas of a bin and places rectangles into them."""

    def __init__(self, bin_size, allow_flip=False, spaces=None):
        self.allow_flip = allow_flip
        self.flipping_mode = FlippingOption.ENABLED
        self._spaces = spaces if spaces is not None else DefaultEmptySpaces()
        self._aabb = RectWH()
        self.reset(bin_size)

    def reset(self, bin_size):
        """Empty the bin and resize it to ``bin_size``."""
        self._aabb = RectWH()
        self._spaces.reset()
        self._spaces.add(RectXYWH(0, 0, bin_size.w, bin_size.h))

    def _accept(self, index, image, candidate, splits, flipped):
        self._spaces.remove(index)
        for split in splits.spaces:
            if not self._spaces.add(split):
                return None

        if self.allow_flip:
            result = RectXYWHF.create(
                candidate.x, candidate.y, image.w, image.h, flipped
            )
        else:
            result = RectXYWH(candidate.x, candidate.y, image.w, image.h)
        self._aabb.expand_with(result)
        return result

    def insert(self, image, report_candidate=None):
        """Place ``image`` in a free space and return where, or None."""
        for index in reversed(range(len(self._spaces))):
            candidate = self._spaces[index]
            if report_candidate is not None:
                report_candidate(candidate)

            if self.allow_flip and self.flipping_mode is FlippingOption.ENABLED:
                normal = insert_and_split(image, candidate)
                flipped = insert_and_split(image.flipped(), candidate)

                if normal and flipped:
                    if flipped.better_than(normal):
                        return self._accept(index, image, candidate, flipped, True)
                    return self._accept(index, image, candidate, normal, False)
                if normal:
                    return self._accept(index, image, candidate, normal, False)
                if flipped:
                    return self._accept(index, image, candidate, flipped, True)
            else:
                normal = insert_and_split(image, candidate)
                if normal:
                    return self._accept(index, image, candidate, normal, False)

        return None

    def get_rects_aabb(self):
        """Return the bounding size of everything inserted since the last reset."""
        return RectWH(self._aabb.w, self._aabb.h)

    def get_spaces(self):
        """Return the collection of free spaces."""
        return self._spaces