from __future__ import annotations

from game.log import getLogger
from solver.session import GameResult, GameSession, PartitionResult

log = getLogger(__name__)


def analyse_partitions(session: GameSession) -> GameResult | None:
    """
    Test both partition probes and drop a partition that cannot contribute.

    A probe explaining all slots (total == slots) rules out the other
    partition. A probe scoring nothing rules out its own partition and
    marks the other one with a synthetic total of all slots and red 1, so
    the color tests treat it as the whole secret without pinning any
    position. In both cases the remaining probe is not sent.

    Args:
        session: The running game.
    Returns:
        GameResult on a win or protocol error, None otherwise.
    """
    slots = session.rules["code_length"]
    results = session.results

    for i in range(len(session.partitions)):
        j = (i + 1) % 2
        response = session.commit_guess(session.partitions[i])
        terminal = session.finish(response)
        if terminal is not None:
            return terminal

        results[i].red = response.red
        results[i].white = response.white
        results[i].total = response.total

        cleared = None
        if response.total == slots:
            results[j] = PartitionResult()
            cleared = j
        elif response.total == 0:
            results[j].total = slots
            results[j].red = 1
            results[j].white = 0
            cleared = i

        if cleared is not None:
            for color in session.partition_colors(cleared):
                session.possible[color].eliminate()
            log.info(
                "partition %d ruled out after probing partition %d", cleared, i
            )
            break

    return None
