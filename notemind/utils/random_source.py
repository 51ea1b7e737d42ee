"""Seedable randomness for challenge selection and id suffixes."""

import random
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


class RandomSource:
    """
    Thin wrapper over random.Random.

    Pass a seed for reproducible output; omit it for system entropy.
    """

    def __init__(self, seed: int | None = None):
        self._random = random.Random(seed)

    def choice(self, options: Sequence[T]) -> T:
        """Pick one element of a non-empty sequence."""
        if not options:
            raise IndexError("Cannot choose from an empty sequence")
        return options[self._random.randrange(len(options))]

    def token(self, length: int = 4) -> str:
        """Random lower-case base36 string."""
        return "".join(self._random.choice(BASE36_ALPHABET) for _ in range(length))
