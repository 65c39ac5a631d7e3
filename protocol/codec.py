"""Bit-level encoding of guesses and responses.

A request is a 16 bit word: slot ``i`` occupies bits ``[3i, 3i+2]`` and
bit 15 carries the parity of the 15 color bits. It is transmitted low byte
first. A response is a single byte: bits 0-2 red, bits 3-5 white and
bits 6-7 the error code.
"""

from __future__ import annotations

from dataclasses import dataclass

from game.colors import COLOR_MASK, COLOR_WIDTH, Color
from game.ruleset import DEFAULT_RULES
from game.secret_code import Code

SLOTS = DEFAULT_RULES["code_length"]
REQUEST_WIDTH = 2
RESPONSE_WIDTH = 1

PARITY_BIT = 15
COLOR_BITS = SLOTS * COLOR_WIDTH
COLOR_FIELD = (1 << COLOR_BITS) - 1

ERROR_NONE = 0
ERROR_PARITY = 1
ERROR_GAME_LOST = 2


@dataclass(frozen=True)
class Response:
    red: int
    white: int
    error: int = ERROR_NONE

    @property
    def total(self) -> int:
        return self.red + self.white

    @property
    def is_error(self) -> bool:
        return self.error != ERROR_NONE

    @property
    def is_win(self) -> bool:
        return not self.is_error and self.red == SLOTS


def parity(word: int) -> int:
    """XOR over the 15 color bits of a request word."""
    bits = word & COLOR_FIELD
    p = 0
    for _ in range(COLOR_BITS):
        p ^= bits & 0x1
        bits >>= 1
    return p


def pack(code: Code) -> int:
    """
    Pack a code into its 15 bit in-memory layout (parity bit clear).

    Args:
        code (Code): The colors to pack, slot 0 first.
    Returns:
        int: The packed word.
    """
    if len(code) != SLOTS:
        raise ValueError(f"Code length must be {SLOTS}, but got {len(code)}.")
    word = 0
    for position, color in enumerate(code):
        value = int(color)
        if value & ~COLOR_MASK:
            raise ValueError(f"Color value {value} is wider than {COLOR_WIDTH} bits.")
        word |= value << (position * COLOR_WIDTH)
    return word


def unpack(word: int) -> Code:
    """Reverse pack(); the parity bit is ignored."""
    return Code(
        Color.from_bits((word >> (position * COLOR_WIDTH)) & COLOR_MASK)
        for position in range(SLOTS)
    )


def encode(code: Code) -> bytes:
    """
    Build the 2 byte request for a guess.

    The parity bit is computed fresh on every call.

    Args:
        code (Code): The guess.
    Returns:
        bytes: Low byte first, then high byte.
    """
    word = pack(code)
    word |= parity(word) << PARITY_BIT
    return bytes((word & 0xFF, word >> 8))


def decode_request(data: bytes) -> int:
    """Reassemble the request word from its wire bytes."""
    if len(data) != REQUEST_WIDTH:
        raise ValueError(f"Request must be {REQUEST_WIDTH} bytes, got {len(data)}.")
    return data[0] | (data[1] << 8)


def decode(data) -> Response:
    """
    Split a response byte into its fields.

    Args:
        data (int | bytes): The response byte.
    Returns:
        Response: red, white and error fields.
    """
    if isinstance(data, (bytes, bytearray)):
        if len(data) != RESPONSE_WIDTH:
            raise ValueError(
                f"Response must be {RESPONSE_WIDTH} byte, got {len(data)}."
            )
        data = data[0]
    return Response(
        red=data & 0x7,
        white=(data >> 3) & 0x7,
        error=(data >> 6) & 0x3,
    )


def encode_response(red: int, white: int, error: int = ERROR_NONE) -> bytes:
    """Build a response byte the way the server does."""
    return bytes(((error & 0x3) << 6 | (white & 0x7) << 3 | (red & 0x7),))
