from dataclasses import dataclass

from slicey.rectangle import Rectangle


@dataclass(frozen=True)
class Claim:
    """A claim on a rectangular region of the grid."""

    id: int
    rect: Rectangle
