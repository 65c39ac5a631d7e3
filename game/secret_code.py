import random

from .colors import Color
from .ruleset import DEFAULT_RULES


class Code:
    """
        Represents a complete Mastermind code: the secret, a guess or a
        candidate.
    Attributes:
        sequence (tuple[Color, ...]): The colors, slot 0 first.
        rules (dict): The ruleset for validation.
        is_valid (bool): Whether the code is valid according to the rules."""

    def __init__(self, sequence=None, rules=None):
        """
        Initialize a Code instance.

        Args:
            sequence (iterable or str or None): Colors (or their integer
            values), or a string of display letters such as 'edgor'.
            rules (dict or None): Reference to the ruleset.
        """

        self.rules = rules or DEFAULT_RULES
        if isinstance(sequence, str):
            self.sequence = tuple(
                Color.from_name(c) for c in sequence.replace(" ", "")
            )
        elif sequence is None:
            self.sequence = ()
        else:
            self.sequence = tuple(Color.from_bits(int(c)) for c in sequence)

        self.is_valid = False
        if self.sequence:
            self.is_valid = self.validate()

    @classmethod
    def uniform(cls, color, rules=None):
        """Return the monochrome code that repeats color in every slot."""
        rules = rules or DEFAULT_RULES
        return cls([color] * rules["code_length"], rules=rules)

    def generate_random(self, rng=None):
        """
        Generate a random valid code according to the rules.

        Args:
            rng (random.Random or None): Source of randomness. Defaults to
            the module level generator.
        """
        rng = rng or random
        self.sequence = tuple(
            rng.choices(list(Color), k=self.rules["code_length"])
        )
        self.is_valid = self.validate()
        return self

    def validate(self, strict: bool = True) -> bool:
        """
        Validate the current code length.

        Args:
            strict (bool): If True, raise ValueError when validation fails.
        Returns:
            bool: True if the code is valid.
        """
        if len(self.sequence) != self.rules["code_length"]:
            if strict:
                raise ValueError(
                    f"Code length must be {self.rules['code_length']}, "
                    f"but got {len(self.sequence)}."
                )
            return False
        return True

    def exact_matches(self, other) -> int:
        """
        Count slots where both codes hold the same color.

        Args:
            other (Code): The code to compare against.
        Returns:
            int: Number of slots matching in color and position.
        """
        return sum(
            1 for mine, theirs in zip(self.sequence, other.sequence)
            if mine == theirs
        )

    def compare_with(self, guess) -> tuple[int, int]:
        """
        Compare this secret code with a guess and compute the feedback.

        Args:
            guess (Code): The code compared against this one.

        Returns:
            tuple[int, int]: (red, white)
            red: slots with correct color in the correct position,
            white: further correct colors in the wrong position.

        Notes:
            Slots counted as red are excluded from white-counting to
            avoid double-counting.
        """

        red = 0
        white = 0

        remaining_code = list(self.sequence)
        remaining_guess = list(guess.sequence)

        for i in range(len(self.sequence)):
            if self.sequence[i] == guess.sequence[i]:
                red += 1
                remaining_guess[i] = None
                remaining_code[i] = None

        for color in remaining_guess:
            if color is not None and color in remaining_code:
                white += 1
                remaining_code[remaining_code.index(color)] = None

        return (red, white)

    def colors_used(self) -> set:
        """Return the set of distinct colors in this code."""
        return set(self.sequence)

    def as_string(self):
        """
        Return the code as display letters (e.g. 'edgor').
        Returns:
            str: The code as a string.
        """
        return (
            "".join(c.letter for c in self.sequence) if self.sequence
            else "EMPTY"
        )

    def __iter__(self):
        return iter(self.sequence)

    def __len__(self):
        return len(self.sequence)

    def __getitem__(self, index):
        return self.sequence[index]

    def __eq__(self, other):
        if isinstance(other, Code):
            return self.sequence == other.sequence
        if isinstance(other, (list, tuple)):
            return list(self.sequence) == list(other)
        return False

    def __hash__(self):
        return hash(self.sequence)

    def __repr__(self):
        return f"Code('{self.as_string()}')"

    def __str__(self):
        return self.as_string()
