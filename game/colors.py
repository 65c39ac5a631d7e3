import enum

from .ruleset import DEFAULT_RULES

COLOR_WIDTH = DEFAULT_RULES["color_width"]
COLOR_MASK = (1 << COLOR_WIDTH) - 1


class Color(enum.IntEnum):
    """The eight peg colors, numbered the way they travel on the wire."""

    BEIGE = 0
    DARKBLUE = 1
    GREEN = 2
    ORANGE = 3
    RED = 4
    BLACK = 5
    VIOLET = 6
    WHITE = 7

    @classmethod
    def from_bits(cls, value: int) -> "Color":
        """
        Convert a raw 3-bit field into a Color.

        Args:
            value (int): The field value.
        Returns:
            Color: The matching color.
        Raises:
            ValueError: If value does not fit into COLOR_WIDTH bits.
        """
        if value < 0 or value > COLOR_MASK:
            raise ValueError(
                f"Color value {value} does not fit into {COLOR_WIDTH} bits."
            )
        return cls(value)

    @classmethod
    def from_name(cls, name: str) -> "Color":
        """Look up a color by its ruleset name or display letter."""
        name = name.strip().lower()
        letters = DEFAULT_RULES["display"]["letter_map"]
        for color in cls:
            if name in (color.name.lower(), letters[color.name.lower()]):
                return color
        allowed = ", ".join(DEFAULT_RULES["colors"])
        raise ValueError(f"Invalid color '{name}'. Allowed: {allowed}.")

    @property
    def letter(self) -> str:
        return DEFAULT_RULES["display"]["letter_map"][self.name.lower()]
