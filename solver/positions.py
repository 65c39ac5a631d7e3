from __future__ import annotations

from game.log import getLogger
from solver.session import GameSession

log = getLogger(__name__)


def analyse_positions(session: GameSession) -> None:
    """
    Shrink the slot masks using the partition probes.

    No red at all means no partition color sits where the probe put it.
    If the probe's red count equals every occurrence the color tests found
    for the partition, each of its colors sits only where the probe put it.
    Anything in between is left to the combination search.
    """
    for i, result in enumerate(session.results):
        assignment = session.partitions[i]

        if result.red == 0:
            for slot, color in enumerate(assignment):
                record = session.possible[color]
                if not record.eliminated:
                    record.exclude(slot)

        elif result.red == result.real_hits:
            for color in set(assignment):
                record = session.possible[color]
                if record.count:
                    record.pin(
                        slot for slot, c in enumerate(assignment) if c == color
                    )
                else:
                    record.eliminate()

    log.debug("possibilities: %s", session.possible)
