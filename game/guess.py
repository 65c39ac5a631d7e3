from .secret_code import Code


class Guess:
    """
        A code that was submitted to the server, together with its feedback.
    Attributes:
        code (Code): The submitted code.
        round (int): The round in which the guess was submitted (1-based).
        red (int | None): Slots matching in color and position.
        white (int | None): Further color matches in the wrong position.
        error (int): Error bits reported by the server (0 = none)."""

    def __init__(self, code, round_number: int = 0):
        self.code = code if isinstance(code, Code) else Code(code)
        self.round = round_number
        self.red = None
        self.white = None
        self.error = 0

    def apply_feedback(self, red: int, white: int, error: int = 0):
        """
        Store the decoded server response.
        Args:
            red (int): Red count.
            white (int): White count.
            error (int): Error bits.
        """
        self.red = red
        self.white = white
        self.error = error

    def get_feedback(self):
        """Return the stored feedback as (red, white)."""
        return (self.red, self.white)

    def __repr__(self):
        return (
            f"Guess({self.code.as_string()!r}, round={self.round}, "
            f"red={self.red}, white={self.white})"
        )

    def __str__(self):
        return self.code.as_string()
