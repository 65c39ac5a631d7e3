from __future__ import annotations

import enum

from game.errors import InvariantViolation
from game.log import getLogger
from solver.session import GameResult, GameSession

log = getLogger(__name__)


class SearchState(enum.Enum):
    SELECTING = enum.auto()
    SUBMITTING = enum.auto()
    WON = enum.auto()
    ERROR = enum.auto()
    EXHAUSTED = enum.auto()


class ConsistencySearch:
    """
    Play the remaining candidates until the secret is hit.

    The next guess is always the first candidate that agrees with every
    guess submitted so far in exactly as many slots as that guess scored
    red. The candidate list is only ever filtered, never rebuilt.

    Attributes:
        session: The running game; its candidates must be populated.
        state: Current SearchState.
        chosen: Arena index of the candidate about to be submitted.
    """

    def __init__(self, session: GameSession):
        self.session = session
        self.state = SearchState.SELECTING
        self.chosen = None

    def is_consistent(self, code) -> bool:
        """True if code agrees with every processed guess's red count."""
        for entry in self.session.processed:
            if code.exact_matches(entry.code) != entry.red:
                return False
        return True

    def select(self) -> int | None:
        """Arena index of the first consistent candidate, None if none is left."""
        candidates = self.session.candidates
        for index in candidates.indices():
            if self.is_consistent(candidates.entries[index].code):
                return index
        return None

    def step(self) -> GameResult | None:
        """Advance the state machine by one transition."""
        if self.state is SearchState.SELECTING:
            self.chosen = self.select()
            if self.chosen is None:
                self.state = SearchState.EXHAUSTED
            else:
                self.state = SearchState.SUBMITTING
            return None

        if self.state is SearchState.SUBMITTING:
            candidates = self.session.candidates
            entry = candidates.entries[self.chosen]
            response = self.session.commit_guess(entry.code)
            entry.red = response.red
            candidates.remove(self.chosen)
            self.chosen = None

            result = self.session.finish(response)
            if result is None:
                self.state = SearchState.SELECTING
                return None
            self.state = SearchState.WON if result.won else SearchState.ERROR
            return result

        if self.state is SearchState.EXHAUSTED:
            raise InvariantViolation(
                f"no consistent candidate left after {self.session.round} rounds"
            )

        raise InvariantViolation(f"search already finished ({self.state.name})")

    def run(self) -> GameResult:
        log.info("searching %d candidates", len(self.session.candidates))
        while True:
            result = self.step()
            if result is not None:
                return result
