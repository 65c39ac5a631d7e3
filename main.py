from __future__ import annotations

import argparse
import random
import time

import numpy as np
from pwnlib.context import context

from game.board import Board
from game.log import install_default_handler
from protocol.transport import BoardTransport
from solver.driver import play_game
from state.persistence import save_results


def play_benchmark(games: int, seed: int | None = None, progress: bool = False) -> dict:
    """
    Auto-play games against the in-process referee.

    Args:
        games: Number of games.
        seed: Seed for the secret codes; None for a random run.
        progress: Print one line per game.
    Returns:
        dict: Per-game columns (secret, won, status, rounds, total_time_s).
    """
    rng = random.Random(seed)
    results = {
        "seed": seed,
        "secret": [],
        "won": [],
        "status": [],
        "rounds": [],
        "total_time_s": [],
    }

    for counter in range(1, games + 1):
        board = Board().initialize_game(rng)

        start_time = time.perf_counter()
        result = play_game(BoardTransport(board))
        end_time = time.perf_counter()

        results["secret"].append(board.reveal_code())
        results["won"].append(result.won)
        results["status"].append(result.status.value)
        results["rounds"].append(result.rounds)
        results["total_time_s"].append(end_time - start_time)

        if progress:
            print(
                f"Game {counter}: {board.reveal_code()} "
                f"{result.status.value} in {result.rounds} rounds"
            )

    return results


def summarize(results: dict) -> dict:
    """Average/min/max rounds and time over the won games."""
    won = np.array(results["won"], dtype=bool)
    rounds = np.array(results["rounds"], dtype=np.int32)[won]
    times = np.array(results["total_time_s"], dtype=np.float64)[won]

    if rounds.size == 0:
        return {"games": len(won), "won": 0}

    return {
        "games": int(won.size),
        "won": int(rounds.size),
        "avg_rounds": float(np.mean(rounds)),
        "min_rounds": int(np.min(rounds)),
        "max_rounds": int(np.max(rounds)),
        "avg_time_s": float(np.mean(times)),
        "max_time_s": float(np.max(times)),
        "min_time_s": float(np.min(times)),
    }


def main(argv=None):
    ap = argparse.ArgumentParser(description="Benchmark the solver offline.")
    ap.add_argument("--games", type=int, default=100, help="Games to play")
    ap.add_argument("--seed", type=int, default=None, help="Seed for secrets")
    ap.add_argument(
        "--out", default="results/benchmark.json", help="Where to save results"
    )
    ap.add_argument("--log-level", default="warning", help="pwntools log level")
    ap.add_argument("--progress", action="store_true", help="Print every game")
    args = ap.parse_args(argv)

    install_default_handler()
    context.log_level = args.log_level

    results = play_benchmark(args.games, seed=args.seed, progress=args.progress)
    stats = summarize(results)
    results["stats"] = stats
    save_results(results, args.out)

    # Print overall statistics
    print(f"\nGames won: {stats['won']} of {stats['games']}")
    if stats["won"]:
        print(f"Average rounds over won games: {stats['avg_rounds']:.2f}")
        print(f"Max rounds: {stats['max_rounds']}")
        print(f"Min rounds: {stats['min_rounds']}")
        print(f"Average time: {stats['avg_time_s'] * 1000:.2f} ms")
        print(f"Max time: {stats['max_time_s'] * 1000:.2f} ms")
    print(f"Results saved to {args.out}")
    return stats


if __name__ == "__main__":
    main()
