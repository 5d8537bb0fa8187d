"""Card, Color, Shape and CardType for Elements."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Color(str, Enum):
    """Card colors. NONE marks a shape-only Single card, WILD an Elements card."""

    BLUE = "blue"
    RED = "red"
    GREEN = "green"
    PURPLE = "purple"
    NONE = "none"
    WILD = "wild"


class Shape(str, Enum):
    """Card shapes. NONE marks a color-only Single card, WILD an Elements card."""

    CIRCLE = "circle"
    SQUARE = "square"
    TRIANGLE = "triangle"
    HEXAGON = "hexagon"
    NONE = "none"
    WILD = "wild"


class CardType(str, Enum):
    """Card types.

    VIRTUAL never appears on a real card; it tags the effective top derived
    from a forced Elements choice.
    """

    REGULAR = "regular"
    SINGLE = "single"
    ELEMENTS = "elements"
    VIRTUAL = "virtual"


PLAIN_COLORS = (Color.BLUE, Color.RED, Color.GREEN, Color.PURPLE)
PLAIN_SHAPES = (Shape.CIRCLE, Shape.SQUARE, Shape.TRIANGLE, Shape.HEXAGON)


@dataclass(eq=False)
class Card:
    """An Elements card.

    Regular cards show a color and a shape. Single cards show only one of
    them, the other is NONE. Elements cards start WILD/WILD and take a
    display color and shape once a player resolves them.

    Cards compare by identity: the deck holds four copies of every regular
    card and each copy is tracked on its own.
    """

    type: CardType
    color: Color
    shape: Shape
    display_color: Optional[Color] = None
    display_shape: Optional[Shape] = None

    def __post_init__(self) -> None:
        if self.type is CardType.REGULAR:
            if self.color not in PLAIN_COLORS or self.shape not in PLAIN_SHAPES:
                raise ValueError("Regular cards need a plain color and shape")
        elif self.type is CardType.SINGLE:
            color_only = self.color in PLAIN_COLORS and self.shape is Shape.NONE
            shape_only = self.color is Color.NONE and self.shape in PLAIN_SHAPES
            if not (color_only or shape_only):
                raise ValueError("Single cards show exactly one of color or shape")
        elif self.type is CardType.ELEMENTS:
            if self.color is not Color.WILD or self.shape is not Shape.WILD:
                raise ValueError("Elements cards must be wild/wild")
        else:
            raise ValueError(f"Invalid card type: {self.type}")
        if self.type is not CardType.ELEMENTS and (
            self.display_color is not None or self.display_shape is not None
        ):
            raise ValueError("Only Elements cards take a display override")

    @property
    def is_elements(self) -> bool:
        return self.type is CardType.ELEMENTS

    @property
    def is_resolved(self) -> bool:
        """True once an Elements card carries a chosen color and shape."""
        return self.display_color is not None and self.display_shape is not None

    def transform(self, color: Color, shape: Shape) -> None:
        """Write the chosen color and shape onto an Elements card (once)."""
        if not self.is_elements:
            raise ValueError("Only Elements cards can be transformed")
        if self.is_resolved:
            raise ValueError("Elements card was already transformed")
        if color not in PLAIN_COLORS or shape not in PLAIN_SHAPES:
            raise ValueError("Elements choice needs a plain color and shape")
        self.display_color = color
        self.display_shape = shape

    def __str__(self) -> str:
        if self.is_elements:
            if self.is_resolved:
                return f"elements({self.display_color.value}_{self.display_shape.value})"
            return "elements"
        if self.type is CardType.SINGLE:
            if self.shape is Shape.NONE:
                return f"{self.color.value}_only"
            return f"{self.shape.value}_only"
        return f"{self.color.value}_{self.shape.value}"
