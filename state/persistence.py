# state/persistence.py
import json
from pathlib import Path
from .game_state import GameState


def save_state(game_state: GameState, path: str):
    """
    Save a game transcript to disk as JSON.
    Args:
        game_state (GameState): The game state to save.
        path (str): The file path to save the game state to.
    """
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(game_state.to_dict(), f, indent=2)


def load_state(path: str) -> GameState:
    """
    Load a game transcript from disk.
    Args:
        path (str): The file path to load the game state from.
    Returns:
        GameState: The loaded game state; its guesses are plain dicts."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return GameState.from_dict(data)


def save_results(results: dict, path: str):
    """
    Save benchmark results as JSON.
    Args:
        results (dict): Per-game columns as produced by main.py.
        path (str): Target file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(results, f, indent=2)
