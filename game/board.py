from protocol import codec

from .ruleset import DEFAULT_RULES
from .secret_code import Code


class Board:
    """Referee for offline play. Holds the secret and scores requests
    exactly like the network server."""

    def __init__(self, secret=None, rules=None):
        """Initialize the board with a given ruleset and optional secret."""
        self.rules = rules or DEFAULT_RULES
        self.secret_code = Code(secret, rules=self.rules) if secret else None
        self.guesses = []
        self.current_attempt = 0
        self.max_attempts = self.rules.get("max_attempts", 35)
        self.is_over = False
        self.is_won = False

    def initialize_game(self, rng=None):
        """Set up a new game: generate a secret code and reset state."""
        self.secret_code = Code(rules=self.rules).generate_random(rng)
        self.guesses = []
        self.current_attempt = 0
        self.is_over = False
        self.is_won = False
        return self

    def respond(self, request: bytes) -> bytes:
        """
        Score one 2 byte request and return the 1 byte response.

        A request whose parity bit does not match its color bits gets
        error 1; a guess beyond max_attempts gets error 2. Both end the
        game.
        """
        word = codec.decode_request(request)
        self.current_attempt += 1

        error = codec.ERROR_NONE
        if (word >> codec.PARITY_BIT) & 0x1 != codec.parity(word):
            error |= codec.ERROR_PARITY
        if self.current_attempt > self.max_attempts:
            error |= codec.ERROR_GAME_LOST

        guess = codec.unpack(word)
        self.guesses.append(guess)
        red, white = self.secret_code.compare_with(guess)

        if error:
            self.is_over = True
        elif red == self.rules["code_length"]:
            self.is_over = True
            self.is_won = True
        return codec.encode_response(red, white, error)

    def reveal_code(self):
        """Return the secret code (used at the end of the game)."""
        return self.secret_code.as_string()

    def remaining_attempts(self):
        """Return how many guesses are left."""
        return max(0, self.max_attempts - self.current_attempt)
