# state/game_state.py


class GameState:
    """Container for a finished (or aborted) game's transcript"""

    def __init__(
        self, rules, guesses, rounds, status, possible=None, code=None
    ):
        self.rules = rules
        self.guesses = guesses
        self.rounds = rounds
        self.status = status
        self.possible = possible or []
        self.secret_code = code

    @classmethod
    def from_session(cls, session, result, code=None):
        # Snapshot what the session learned before it is closed
        return cls(
            rules=session.rules,
            guesses=list(session.history),
            rounds=result.rounds,
            status=result.status.value,
            possible=[p.to_dict() for p in session.possible],
            code=code,
        )

    def to_dict(self):
        # Return the gamestate as dictionary for i.e. json
        return {
            "rules": self.rules,
            "guesses": [
                {
                    "round": g.round,
                    "guess": g.code.as_string(),
                    "feedback": list(g.get_feedback()),
                    "error": g.error,
                }
                for g in self.guesses
            ],
            "rounds": self.rounds,
            "status": self.status,
            "possible": self.possible,
            "secret_code": self.secret_code,
        }

    @classmethod
    def from_dict(cls, data):
        # Load the gamestate from a dictionary; guesses stay plain dicts
        return cls(
            rules=data["rules"],
            guesses=data["guesses"],
            rounds=data["rounds"],
            status=data["status"],
            possible=data.get("possible"),
            code=data.get("secret_code"),
        )
