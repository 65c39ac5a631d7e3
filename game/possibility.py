from .ruleset import DEFAULT_RULES

SLOTS = DEFAULT_RULES["code_length"]
ALL_SLOTS = (1 << SLOTS) - 1
COUNT_WIDTH = 3


def popcount(value: int) -> int:
    return bin(value).count("1")


class Possibility:
    """
    What is known about one color: the slots it may still occupy and how
    often it occurs in the secret.

    Attributes:
        mask (int): Bit j set means the color may sit in slot j.
        count (int): Exact occurrences in the secret, 0 while unknown or
            once the color is eliminated.
    """

    def __init__(self, mask: int = ALL_SLOTS, count: int = 0):
        self.mask = mask & ALL_SLOTS
        self.count = count

    def eliminate(self):
        """The color does not occur in the secret."""
        self.mask = 0
        self.count = 0

    @property
    def eliminated(self) -> bool:
        return self.mask == 0 and self.count == 0

    def add_count(self, n: int):
        self.count += n
        if self.count >= 1 << COUNT_WIDTH:
            raise ValueError(f"Count {self.count} does not fit into {COUNT_WIDTH} bits.")

    def exclude(self, slot: int):
        """Clear one slot bit, leaving the count alone."""
        self.mask &= ~(1 << slot) & ALL_SLOTS

    def pin(self, slots):
        """Allow exactly the given slots."""
        mask = 0
        for slot in slots:
            mask |= 1 << slot
        self.mask = mask

    def packed(self) -> int:
        """The 8 bit record: count in the high 3 bits, slot mask below."""
        return (self.count << SLOTS) | self.mask

    @classmethod
    def from_packed(cls, value: int) -> "Possibility":
        return cls(mask=value & ALL_SLOTS, count=value >> SLOTS)

    def to_dict(self):
        return {"mask": self.mask, "count": self.count}

    def __repr__(self):
        return f"Possibility(mask={self.mask:05b}, count={self.count})"
