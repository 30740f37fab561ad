"""Randomizers – strings and byte sequences."""
from __future__ import annotations

import functools
import string
from typing import TYPE_CHECKING, Final

from mp_populator.randomizers.base import Randomizer

if TYPE_CHECKING:
    from mp_populator.engine.context import RandomizationContext

# Basic Latin through Latin Extended-B.
_MAX_CODE_POINT: Final = 0x024F


@functools.cache
def alphabet_for(charset: str) -> str:
    """Letters encodable in *charset*, in code point order."""
    letters = []
    for code_point in range(_MAX_CODE_POINT + 1):
        char = chr(code_point)
        if not char.isalpha():
            continue
        try:
            char.encode(charset)
        except UnicodeEncodeError:
            continue
        letters.append(char)
    return "".join(letters) or string.ascii_letters


class StringRandomizer(Randomizer[str]):
    """Random letters with a length drawn uniformly from ``[min_length, max_length]``."""

    def __init__(self, alphabet: str, min_length: int, max_length: int) -> None:
        if not alphabet:
            raise ValueError("alphabet must not be empty")
        if min_length > max_length:
            raise ValueError(f"min_length ({min_length}) must be <= max_length ({max_length})")
        self.alphabet = alphabet
        self.min_length = min_length
        self.max_length = max_length

    @classmethod
    def for_charset(cls, charset: str, min_length: int, max_length: int) -> "StringRandomizer":
        return cls(alphabet_for(charset), min_length, max_length)

    def generate(self, context: "RandomizationContext") -> str:
        length = context.random.randint(self.min_length, self.max_length)
        return "".join(context.random.choices(self.alphabet, k=length))


class BytesRandomizer(Randomizer[bytes]):
    def __init__(self, min_length: int, max_length: int, *, mutable: bool = False) -> None:
        self.min_length = min_length
        self.max_length = max_length
        self.mutable = mutable

    def generate(self, context: "RandomizationContext") -> bytes:
        data = context.random.randbytes(context.random.randint(self.min_length, self.max_length))
        return bytearray(data) if self.mutable else data


__all__ = ["BytesRandomizer", "StringRandomizer", "alphabet_for"]
