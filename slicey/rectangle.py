from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Rectangle:
    """Axis aligned region covering [left, left + width) x [top, top + height).

    A rectangle with zero width or height is empty and overlaps nothing.
    """

    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def overlaps(self, other: "Rectangle") -> "Rectangle | None":
        """Get the region shared by this rectangle and another

        Args:
            other: The rectangle to intersect with

        Returns:
            The overlapping rectangle, or None if the two share no area. Rectangles
            touching only along an edge or at a corner do not overlap.
        """
        top = max(self.top, other.top)
        left = max(self.left, other.left)
        bottom = min(self.bottom, other.bottom)
        right = min(self.right, other.right)

        height = bottom - top
        width = right - left
        if height <= 0 or width <= 0:
            return None
        return Rectangle(left=left, top=top, width=width, height=height)

    def cells(self) -> Iterator[tuple[int, int]]:
        """Iterate the (x, y) unit cells inside the rectangle"""
        for x in range(self.left, self.right):
            for y in range(self.top, self.bottom):
                yield (x, y)
