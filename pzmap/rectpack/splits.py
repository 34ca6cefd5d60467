"""Placing an image in an empty space and splitting off what is left."""

from dataclasses import dataclass, replace

from pzmap.rectpack.structs import RectXYWH


@dataclass(frozen=True)
class CreatedSplits:
    """Spaces left over after an insertion; a count of -1 means it did not fit."""

    count: int = 0
    spaces: tuple = ()

    @classmethod
    def failed(cls):
        """The image did not fit."""
        return cls(count=-1)

    @classmethod
    def none(cls):
        """The image filled the space exactly."""
        return cls()

    def better_than(self, other):
        """True when this result leaves fewer spaces than ``other``."""
        return self.count < other.count

    def __bool__(self):
        return self.count != -1


def _splits(*spaces):
    return CreatedSplits(count=len(spaces), spaces=spaces)


def insert_and_split(image, space):
    """Put ``image`` at the corner of ``space`` and return the remaining spaces."""
    free_w = space.w - image.w
    free_h = space.h - image.h

    if free_w < 0 or free_h < 0:
        return CreatedSplits.failed()

    if free_w == 0 and free_h == 0:
        return CreatedSplits.none()

    if free_w > 0 and free_h == 0:
        return _splits(replace(space, x=space.x + image.w, w=space.w - image.w))

    if free_w == 0 and free_h > 0:
        return _splits(replace(space, y=space.y + image.h, h=space.h - image.h))

    # Prefer one large and one small leftover over two middling ones.
    if free_w > free_h:
        bigger = RectXYWH(space.x + image.w, space.y, free_w, space.h)
        lesser = RectXYWH(space.x, space.y + image.h, image.w, free_h)
        return _splits(bigger, lesser)

    bigger = RectXYWH(space.x, space.y + image.h, space.w, free_h)
    lesser = RectXYWH(space.x + image.w, space.y, free_w, image.h)
    return _splits(bigger, lesser)