from __future__ import annotations

import enum
from dataclasses import dataclass

from game.colors import Color
from game.errors import GameCancelled
from game.guess import Guess
from game.log import getLogger
from game.possibility import Possibility
from game.ruleset import DEFAULT_RULES
from game.secret_code import Code
from protocol import codec
from solver.code_list import CodeList

log = getLogger(__name__)


class Status(enum.Enum):
    WON = "won"
    PARITY_ERROR = "parity error"
    GAME_LOST = "game lost"
    INTERRUPTED = "interrupted"


@dataclass(frozen=True)
class GameResult:
    status: Status
    rounds: int
    error: int = codec.ERROR_NONE

    @property
    def won(self) -> bool:
        return self.status is Status.WON


@dataclass
class PartitionResult:
    """Feedback for one partition probe plus what the color tests added."""

    red: int = 0
    white: int = 0
    total: int = 0
    real_hits: int = 0


class GameSession:
    """
    Everything one game needs: the server connection, the per-color
    possibility records, the partition results, the combination tree and
    both code lists.

    The session is passed through all phases. close() releases the
    connection and every structure exactly once; it also runs when the
    session is used as a context manager.

    Attributes:
        transport: Object with send(bytes), recv(n), abort() and close().
        rules: The ruleset.
        partitions: The two probe codes, partition A first.
        possible: One Possibility per color, indexed by color value.
        results: One PartitionResult per partition.
        tree: The CombinationTree, once built.
        candidates: Codes still to try.
        processed: Every submitted code with its red count.
        history: Every submitted Guess with full feedback.
        round: Guesses submitted so far.
        cancelled: Set by a signal handler; checked before each round.
        in_round: True while a request is on the wire.
    """

    def __init__(self, transport, rules=None):
        self.transport = transport
        self.rules = rules or DEFAULT_RULES
        self.partitions = [Code(p, rules=self.rules) for p in self.rules["partitions"]]
        self.possible = [Possibility() for _ in range(self.rules["num_colors"])]
        self.results = [PartitionResult(), PartitionResult()]
        self.tree = None
        self.candidates = CodeList()
        self.processed = CodeList()
        self.history: list[Guess] = []
        self.round = 0
        self.cancelled = False
        self.in_round = False
        self._closed = False

    def partition_colors(self, index: int) -> list[Color]:
        """The distinct colors of a partition in ascending order."""
        return sorted(set(self.partitions[index]))

    def cancel(self, *_):
        """
        Request termination; usable directly as a signal handler.

        A round waiting on the server is cut short by aborting the
        transport, so the pending read fails instead of blocking.
        """
        self.cancelled = True
        if self.in_round and not self._closed:
            self.transport.abort()

    def check_cancelled(self):
        if self.cancelled:
            raise GameCancelled(f"cancelled before round {self.round + 1}")

    def commit_guess(self, code: Code) -> codec.Response:
        """
        Run one round-trip: send code, read and decode the response, and
        record the guess in the processed list.

        Raises:
            GameCancelled: If cancellation was requested before the round.
            TransportError: If the connection fails.
        """
        self.check_cancelled()
        self.round += 1

        self.in_round = True
        try:
            self.transport.send(codec.encode(code))
            response = codec.decode(self.transport.recv(codec.RESPONSE_WIDTH))
        finally:
            self.in_round = False

        guess = Guess(code, round_number=self.round)
        guess.apply_feedback(response.red, response.white, response.error)
        self.history.append(guess)
        self.processed.append(code, red=response.red)

        log.debug(
            "round %d: %s -> red %d white %d error %d",
            self.round, code, response.red, response.white, response.error,
        )
        return response

    def finish(self, response: codec.Response) -> GameResult | None:
        """Map a terminal response to a GameResult, None to keep playing."""
        if response.error & codec.ERROR_PARITY:
            return GameResult(Status.PARITY_ERROR, self.round, response.error)
        if response.error:
            return GameResult(Status.GAME_LOST, self.round, response.error)
        if response.is_win:
            return GameResult(Status.WON, self.round)
        return None

    def total_count(self) -> int:
        return sum(p.count for p in self.possible)

    def close(self):
        """Release the connection and all structures. Runs once."""
        if self._closed:
            return
        self._closed = True
        try:
            self.transport.close()
        finally:
            if self.tree is not None:
                self.tree.clear()
                self.tree = None
            self.candidates.clear()
            self.processed.clear()

    @property
    def closed(self) -> bool:
        return self._closed

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
