class MastermindError(Exception):
    """Base class for fatal client errors."""


class TransportError(MastermindError):
    """Connecting, writing or reading the server socket failed."""


class InvariantViolation(MastermindError):
    """The deduction logic ran out of candidates before winning."""


class GameCancelled(MastermindError):
    """A termination signal arrived; raised before the next round starts."""
