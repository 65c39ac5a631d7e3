from __future__ import annotations

from game.errors import GameCancelled, TransportError
from game.log import getLogger
from solver.candidates import flatten
from solver.color_counter import analyse_colors
from solver.combination_tree import CombinationTree
from solver.consistency import ConsistencySearch
from solver.partitions import analyse_partitions
from solver.positions import analyse_positions
from solver.session import GameResult, GameSession, Status

log = getLogger(__name__)


class GameDriver:
    """
    Runs the deduction phases in order on one session:
    partition probes, color counts, position narrowing, combination tree
    and the consistency search. The first phase that ends the game (a win
    or a protocol error) short-circuits the rest.
    """

    def __init__(self, session: GameSession):
        self.session = session

    def play(self) -> GameResult:
        session = self.session
        try:
            for phase in (analyse_partitions, analyse_colors):
                session.check_cancelled()
                result = phase(session)
                if result is not None:
                    return result

            session.check_cancelled()
            analyse_positions(session)

            session.tree = CombinationTree(session.possible)
            flatten(session.tree, session.candidates)
            log.info(
                "combination tree: %d nodes, %d candidates",
                len(session.tree), len(session.candidates),
            )

            return ConsistencySearch(session).run()
        except GameCancelled as e:
            log.info("%s", e)
            return GameResult(Status.INTERRUPTED, session.round)
        except TransportError as e:
            # a read cut short by cancel() ends the game as interrupted
            if not session.cancelled:
                raise
            log.info("round %d aborted: %s", session.round, e)
            return GameResult(Status.INTERRUPTED, session.round)


def play_game(transport, rules=None) -> GameResult:
    """Play one full game over transport and release everything afterwards."""
    with GameSession(transport, rules=rules) as session:
        return GameDriver(session).play()
