import argparse
import json
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt


def _annotate_points(ax, xs, ys, *, fmt="{:.2f}", dx=0, dy=6, fontsize=8):
        """
        Annotate points (x, y) on ax with formatted y values.

        Args:
            ax: matplotlib Axes
            xs: list of x coordinates
            ys: list of y coordinates
            fmt: format string for y values
            dx: x offset in points
            dy: y offset in points
            fontsize: font size for annotations
        """

        for x, y in zip(xs, ys):
            if y is None:
                continue
            ax.annotate(
                fmt.format(y),
                (x, y),
                textcoords="offset points",
                xytext=(dx, dy),
                ha="center",
                va="center",
                fontsize=fontsize,
            )


def compute_run_stats(games: dict):
    """
    Returns:
      avg_rounds (float, np.nan if no won games)
      min_rounds, max_rounds (int | float nan)
      rounds_histogram (np.ndarray) count of won games per round number
      avg_total_time (float, np.nan if no won games)
      n_won (int)
    """
    won = np.array(games.get("won", []), dtype=bool)
    rounds = np.array(games.get("rounds", []), dtype=np.int32)
    total_time = np.array(games.get("total_time_s", []), dtype=np.float32)

    # Guard against length mismatches
    n = min(len(won), len(rounds), len(total_time))
    won = won[:n]
    won_rounds = rounds[:n][won]
    won_times = total_time[:n][won]

    n_won = int(won_rounds.size)
    if n_won == 0:
        return np.nan, np.nan, np.nan, np.zeros(0, dtype=np.int64), np.nan, 0

    avg_rounds = float(np.mean(won_rounds))
    min_rounds = int(np.min(won_rounds))
    max_rounds = int(np.max(won_rounds))
    rounds_histogram = np.bincount(won_rounds)
    avg_total_time = float(np.mean(won_times))

    return avg_rounds, min_rounds, max_rounds, rounds_histogram, avg_total_time, n_won


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--file", default="results/benchmark.json", help="Path to benchmark JSON")
    ap.add_argument("--outdir", default="./results", help="Output directory for PNGs")
    args = ap.parse_args()

    path = Path(args.file)
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    with path.open("r", encoding="utf-8") as f:
        games = json.load(f)

    (avg_rounds,
    min_rounds,
    max_rounds,
    rounds_histogram,
    avg_total_time,
    n_won
    ) = compute_run_stats(games)

    if n_won == 0:
        print(f"[skip] No won games in {path}.")
        return

    plt.rcParams["lines.solid_capstyle"] = "round"
    plt.rcParams["lines.solid_joinstyle"] = "round"
    plt.rcParams["lines.linewidth"] = 1.0

    # Plot 1: rounds needed per game
    plt.figure(figsize=(10, 6))
    xs = np.arange(len(rounds_histogram))
    plt.bar(xs, rounds_histogram, label="Games won")
    _annotate_points(plt.gca(), xs, rounds_histogram, fmt="{:d}", dy=6)
    plt.axvline(avg_rounds, linestyle="--", color="gray", label=f"Average {avg_rounds:.2f}")
    plt.title(f"Rounds per game ({n_won} games won, min {min_rounds}, max {max_rounds})")
    plt.xlabel("Rounds")
    plt.ylabel("Games")
    plt.xticks(xs)
    plt.grid(True, axis="y")
    plt.legend()
    out1 = outdir / "rounds_histogram.png"
    plt.savefig(out1, dpi=200, bbox_inches="tight")
    plt.close()

    # Plot 2: time per game against rounds
    won = np.array(games["won"], dtype=bool)
    rounds = np.array(games["rounds"])[won]
    times_ms = np.array(games["total_time_s"])[won] * 1000.0
    plt.figure(figsize=(10, 6))
    plt.scatter(rounds, times_ms, s=12, alpha=0.6, label="Game")
    plt.axhline(avg_total_time * 1000.0, linestyle="--", color="gray",
                label=f"Average {avg_total_time * 1000.0:.2f} ms")
    plt.title("Solve time per game [won games]")
    plt.xlabel("Rounds")
    plt.ylabel("Total time (ms)")
    plt.grid(True)
    plt.legend()
    out2 = outdir / "time_per_game.png"
    plt.savefig(out2, dpi=200, bbox_inches="tight")
    plt.close()

    print(f"Saved {out1} and {out2}")


if __name__ == "__main__":
    main()
