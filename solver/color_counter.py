from __future__ import annotations

from game.log import getLogger
from game.secret_code import Code
from solver.session import GameResult, GameSession

log = getLogger(__name__)


def analyse_colors(session: GameSession) -> GameResult | None:
    """
    Find the exact number of occurrences of every color.

    The first three colors of each partition still in play are tested with
    monochrome guesses. Testing a partition stops as soon as its colors are
    known to be complete; untested colors are then eliminated. The fourth
    color of a partition is never tested unless both fourth colors are
    open: then partition A's is tested and the slots still unexplained are
    given to partition B's.

    Args:
        session: The running game.
    Returns:
        GameResult on a win or protocol error, None otherwise.
    """
    slots = session.rules["code_length"]
    results = session.results
    possible = session.possible

    total = 0
    last_color_missing = [False, False]

    for i, result in enumerate(results):
        if result.total == 0:
            continue

        colors = session.partition_colors(i)
        found = 0
        for j, color in enumerate(colors[:-1]):
            response = session.commit_guess(Code.uniform(color, session.rules))
            terminal = session.finish(response)
            if terminal is not None:
                return terminal

            if response.total == 0:
                possible[color].eliminate()
                continue

            total += response.total
            result.real_hits += response.total
            possible[color].add_count(response.total)
            found += 1

            if (
                found == result.total
                or total == slots
                or (i == 0 and total + results[1].total == slots)
            ):
                for untested in colors[j + 1:]:
                    possible[untested].eliminate()
                break

        if found < result.total:
            last_color_missing[i] = True

    if total < slots:
        target = 1
        if last_color_missing[0]:
            if last_color_missing[1]:
                fourth = session.partition_colors(0)[-1]
                # a fourth color already ruled out needs no round-trip
                if not possible[fourth].eliminated:
                    response = session.commit_guess(
                        Code.uniform(fourth, session.rules)
                    )
                    terminal = session.finish(response)
                    if terminal is not None:
                        return terminal
                    if response.total == 0:
                        possible[fourth].eliminate()
                    else:
                        possible[fourth].add_count(response.total)
                        total += response.total
                        results[0].real_hits += response.total
            else:
                target = 0

        remainder = slots - total
        fourth = session.partition_colors(target)[-1]
        if remainder == 0:
            possible[fourth].eliminate()
        else:
            possible[fourth].add_count(remainder)
        results[target].real_hits += remainder
    else:
        for i in range(len(results)):
            possible[session.partition_colors(i)[-1]].eliminate()

    log.info(
        "color counts: %s",
        ", ".join(f"{c}={p.count}" for c, p in enumerate(possible) if p.count),
    )
    return None
