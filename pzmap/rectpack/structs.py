"""Rectangle types used by the rectangle packer."""

from dataclasses import dataclass


@dataclass
class RectWH:
    """A width and height with no position."""

    w: int = 0
    h: int = 0

    def flipped(self):
        """Return a copy with width and height swapped."""
        return RectWH(self.h, self.w)

    def max_side(self):
        return self.h if self.h > self.w else self.w

    def min_side(self):
        return self.h if self.h < self.w else self.w

    def area(self):
        return self.w * self.h

    def perimeter(self):
        return 2 * self.w + 2 * self.h

    def expand_with(self, rect):
        """Grow so that ``rect`` (anything with x, y, w, h) fits inside."""
        self.w = max(self.w, rect.x + rect.w)
        self.h = max(self.h, rect.y + rect.h)


@dataclass
class RectXYWH:
    """A positioned rectangle."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0

    def area(self):
        return self.w * self.h

    def perimeter(self):
        return 2 * self.w + 2 * self.h

    def get_wh(self):
        """Return the size of the rectangle."""
        return RectWH(self.w, self.h)


@dataclass
class RectXYWHF:
    """A positioned rectangle that may have been rotated by a quarter turn."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0
    flipped: bool = False

    @classmethod
    def create(cls, x, y, w, h, flipped):
        """Build a rectangle whose sides are swapped when ``flipped`` is true."""
        if flipped:
            return cls(x, y, h, w, True)
        return cls(x, y, w, h, False)

    def area(self):
        return self.w * self.h

    def perimeter(self):
        return 2 * self.w + 2 * self.h

    def get_wh(self):
        """Return the size of the rectangle."""
        return RectWH(self.w, self.h)