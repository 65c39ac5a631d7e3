# Command-line interface: play one game against a server

import argparse
import signal
import sys
from dataclasses import dataclass

from pwnlib.context import context

from game.errors import MastermindError
from game.log import install_default_handler
from protocol.transport import RemoteTransport
from solver.driver import GameDriver
from solver.session import GameSession, Status
from state.game_state import GameState
from state.persistence import save_state

MESSAGES = {
    Status.PARITY_ERROR: "Parity Error",
    Status.GAME_LOST: "Game lost",
    Status.INTERRUPTED: "Game unexpectedly interrupted",
}

EXIT_CODES = {
    Status.WON: 0,
    Status.INTERRUPTED: 1,
    Status.PARITY_ERROR: 2,
    Status.GAME_LOST: 3,
}

TERMINATION_SIGNALS = tuple(
    getattr(signal, name)
    for name in ("SIGINT", "SIGTERM", "SIGQUIT")
    if hasattr(signal, name)
)


@dataclass(frozen=True)
class ClientConfig:
    host: str
    port: int
    log_level: str = "warning"
    save: str | None = None


def port_number(value: str) -> int:
    # plain decimal digits only: no sign, spaces or underscores
    if not value.isascii() or not value.isdigit():
        raise argparse.ArgumentTypeError("Error parsing port as number")
    port = int(value, 10)
    if port < 1 or port > 65535:
        raise argparse.ArgumentTypeError(
            "Port needs to be a number from 1 to 65535"
        )
    return port


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="client",
        description="Solve an 8 color / 5 slot Mastermind game on a server.",
    )
    ap.add_argument("host", help="Server name or address")
    ap.add_argument("port", type=port_number, help="Server port (1-65535)")
    ap.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error"],
        help="Diagnostic output level",
    )
    ap.add_argument("--save", default=None, help="Write a JSON transcript here")
    return ap


def report(result) -> int:
    """Print the outcome and return the exit code."""
    if result.won:
        print(f"Rounds: {result.rounds}")
    else:
        print(MESSAGES[result.status], file=sys.stderr)
    return EXIT_CODES[result.status]


def run(config: ClientConfig) -> int:
    install_default_handler()
    context.log_level = config.log_level

    try:
        transport = RemoteTransport.connect(config.host, config.port)
    except MastermindError as e:
        print(f"client: {e}", file=sys.stderr)
        return 1

    session = GameSession(transport)
    previous = {
        sig: signal.signal(sig, session.cancel) for sig in TERMINATION_SIGNALS
    }
    saved = True
    try:
        with session:
            try:
                result = GameDriver(session).play()
            except MastermindError as e:
                print(f"client: {e} (round {session.round})", file=sys.stderr)
                return 1
            if config.save:
                try:
                    save_state(GameState.from_session(session, result), config.save)
                except OSError as e:
                    print(f"client: saving transcript failed: {e}", file=sys.stderr)
                    saved = False
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)

    code = report(result)
    if not saved:
        return code or 1
    return code


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return run(
        ClientConfig(
            host=args.host,
            port=args.port,
            log_level=args.log_level,
            save=args.save,
        )
    )


if __name__ == "__main__":
    sys.exit(main())
