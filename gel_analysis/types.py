"""Type definitions for the GelAnalysis package.

Defines the NumPy array aliases used throughout the codebase and the small
geometric value types (:class:`Point`, :class:`Size`, :class:`Rect`) returned
by the region-locating operations.
"""

from typing import NewType, TYPE_CHECKING, Tuple

from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    Array2D = NewType("Array2D", NDArray)
    Array1D = NewType("Array1D", NDArray)
else:
    Array2D = NDArray
    Array1D = NDArray


class Point(BaseModel):
    """Integer pixel coordinate; ``x`` runs across the width, ``y`` down the height."""

    model_config = ConfigDict(frozen=True)

    x: int
    y: int

    def as_tuple(self) -> Tuple[int, int]:
        """Return ``(x, y)`` as accepted by OpenCV drawing calls."""
        return (self.x, self.y)


class Size(BaseModel):
    """Integer image extent as ``(width, height)``."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)

    @classmethod
    def of(cls, image: NDArray) -> "Size":
        """Size of a NumPy image (rows are height, columns are width)."""
        height, width = image.shape[:2]
        return cls(width=width, height=height)

    @property
    def area(self) -> int:
        return self.width * self.height

    def as_tuple(self) -> Tuple[int, int]:
        return (self.width, self.height)


class Rect(BaseModel):
    """
    Axis-aligned rectangle given by its top-left corner and extent.

    The raw scanning operations may return rectangles with zero or negative
    extent when no qualifying pixel exists. Such a rectangle is reported by
    :attr:`is_empty` and must not be used to index an image.

    Attributes
    ----------
    x, y : int
        Top-left corner.
    width, height : int
        Extent in pixels. May be non-positive for a "not found" result.
    """

    model_config = ConfigDict(frozen=True)

    x: int
    y: int
    width: int
    height: int

    @property
    def is_empty(self) -> bool:
        """True if the rectangle has non-positive width or height."""
        return self.width <= 0 or self.height <= 0

    @property
    def right(self) -> int:
        """Exclusive right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Exclusive bottom edge."""
        return self.y + self.height

    @property
    def top_left(self) -> Point:
        return Point(x=self.x, y=self.y)

    @property
    def size(self) -> Size:
        return Size(width=max(self.width, 0), height=max(self.height, 0))

    def as_tuple(self) -> Tuple[int, int, int, int]:
        """Return ``(x, y, width, height)``."""
        return (self.x, self.y, self.width, self.height)
