"""Tests for the offline benchmark, transcripts and the plot script."""

import contextlib
import io
import json
import math
import os
import tempfile
import unittest
from unittest import mock

import main
from game.board import Board
from plot import plot
from protocol.transport import BoardTransport
from solver.driver import GameDriver
from solver.session import GameSession
from state.game_state import GameState
from state.persistence import load_state, save_results, save_state


class TestBenchmark(unittest.TestCase):
    """Tests for play_benchmark and summarize."""

    def test_seeded_run_is_reproducible(self) -> None:
        first = main.play_benchmark(5, seed=11)
        second = main.play_benchmark(5, seed=11)
        self.assertEqual(first["secret"], second["secret"])
        self.assertEqual(first["rounds"], second["rounds"])
        self.assertEqual(first["won"], [True] * 5)
        self.assertEqual(first["status"], ["won"] * 5)

    def test_summarize(self) -> None:
        stats = main.summarize(
            {
                "won": [True, False, True],
                "rounds": [7, 35, 9],
                "total_time_s": [0.1, 0.2, 0.3],
            }
        )
        self.assertEqual(stats["games"], 3)
        self.assertEqual(stats["won"], 2)
        self.assertAlmostEqual(stats["avg_rounds"], 8.0)
        self.assertEqual(stats["min_rounds"], 7)
        self.assertEqual(stats["max_rounds"], 9)
        self.assertAlmostEqual(stats["avg_time_s"], 0.2)

    def test_summarize_without_wins(self) -> None:
        stats = main.summarize({"won": [False], "rounds": [35], "total_time_s": [1.0]})
        self.assertEqual(stats, {"games": 1, "won": 0})

    def test_main_writes_results(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            out = os.path.join(tmp, "nested", "benchmark.json")
            with contextlib.redirect_stdout(io.StringIO()):
                stats = main.main(
                    ["--games", "4", "--seed", "3", "--out", out, "--log-level", "error"]
                )
            with open(out, encoding="utf-8") as f:
                saved = json.load(f)
        self.assertEqual(stats["won"], 4)
        self.assertEqual(saved["seed"], 3)
        self.assertEqual(len(saved["rounds"]), 4)
        self.assertEqual(saved["stats"]["games"], 4)


class TestTranscript(unittest.TestCase):
    """Tests for GameState and JSON persistence."""

    def test_round_trip(self) -> None:
        board = Board("edgor")
        session = GameSession(BoardTransport(board))
        with session:
            result = GameDriver(session).play()
            state = GameState.from_session(session, result, code=board.reveal_code())

        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "game.json")
            save_state(state, path)
            loaded = load_state(path)

        self.assertEqual(loaded.status, "won")
        self.assertEqual(loaded.rounds, 7)
        self.assertEqual(loaded.secret_code, "edgor")
        self.assertEqual(loaded.rules["code_length"], 5)
        self.assertEqual(
            [g["round"] for g in loaded.guesses], [1, 2, 3, 4, 5, 6, 7]
        )
        self.assertEqual(loaded.guesses[1], {
            "round": 2, "guess": "rrbvw", "feedback": [0, 1], "error": 0,
        })


class TestPlot(unittest.TestCase):
    """Tests for the benchmark plots."""

    def test_run_stats(self) -> None:
        games = {
            "won": [True, False, True],
            "rounds": [7, 35, 9],
            "total_time_s": [0.1, 0.2, 0.3],
        }
        avg, lo, hi, hist, avg_time, n_won = plot.compute_run_stats(games)
        self.assertAlmostEqual(avg, 8.0)
        self.assertEqual((lo, hi), (7, 9))
        self.assertEqual(len(hist), 10)
        self.assertEqual(hist[7], 1)
        self.assertEqual(hist[9], 1)
        self.assertEqual(int(hist.sum()), 2)
        self.assertAlmostEqual(avg_time, 0.2, places=5)
        self.assertEqual(n_won, 2)

    def test_run_stats_without_wins(self) -> None:
        avg, lo, hi, hist, avg_time, n_won = plot.compute_run_stats({"won": [False], "rounds": [3], "total_time_s": [0.1]})
        self.assertTrue(math.isnan(avg))
        self.assertEqual(hist.size, 0)
        self.assertEqual(n_won, 0)

    def test_main_draws_both_plots(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            results = main.play_benchmark(6, seed=5)
            path = os.path.join(tmp, "benchmark.json")
            save_results(results, path)
            argv = ["plot.py", "--file", path, "--outdir", tmp]
            with mock.patch("sys.argv", argv), contextlib.redirect_stdout(io.StringIO()):
                plot.main()
            self.assertTrue(os.path.exists(os.path.join(tmp, "rounds_histogram.png")))
            self.assertTrue(os.path.exists(os.path.join(tmp, "time_per_game.png")))


if __name__ == "__main__":
    unittest.main()
