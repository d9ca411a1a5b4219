"""Counter-based random source used by the maze generator.

The stream is ChaCha20 (zero nonce, block counter from 0) keyed by
expanding a 64-bit seed through PCG32. Range sampling uses widening
multiplication with a rejection zone, and shuffling is a descending
Fisher-Yates. Mazes are therefore a pure function of the seed and stay
identical across platforms and Python versions, unlike ``random.Random``.
"""

from __future__ import annotations

import struct
from typing import List, MutableSequence, TypeVar

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms

MASK32 = 0xFFFF_FFFF
MASK64 = 0xFFFF_FFFF_FFFF_FFFF

PCG_MUL = 6364136223846793005
PCG_INC = 11634580027462260723

_BUFFER_WORDS = 64  # four ChaCha blocks per refill

T = TypeVar("T")


def _pcg32(state: int) -> tuple[int, int]:
    """Advance ``state`` and return (new_state, output word)."""
    state = (state * PCG_MUL + PCG_INC) & MASK64
    xorshifted = (((state >> 18) ^ state) >> 27) & MASK32
    rot = state >> 59
    out = ((xorshifted >> rot) | (xorshifted << ((32 - rot) & 31))) & MASK32
    return state, out


def expand_seed(seed: int) -> bytes:
    """32-byte ChaCha key derived from a 64-bit seed."""
    state = seed & MASK64
    words = []
    for _ in range(8):
        state, out = _pcg32(state)
        words.append(out)
    return struct.pack("<8I", *words)


class ChaChaRng:
    def __init__(self, key: bytes):
        if len(key) != 32:
            raise ValueError("ChaCha key must be 32 bytes")
        self._stream = Cipher(algorithms.ChaCha20(key, bytes(16)), mode=None).encryptor()
        self._words: List[int] = []
        self._index = 0

    @classmethod
    def seed_from_u64(cls, seed: int) -> "ChaChaRng":
        return cls(expand_seed(seed))

    def _refill(self) -> None:
        block = self._stream.update(bytes(_BUFFER_WORDS * 4))
        self._words = list(struct.unpack(f"<{_BUFFER_WORDS}I", block))
        self._index = 0

    def next_u32(self) -> int:
        if self._index >= len(self._words):
            self._refill()
        word = self._words[self._index]
        self._index += 1
        return word

    def next_u64(self) -> int:
        lo = self.next_u32()
        hi = self.next_u32()
        return (hi << 32) | lo

    def gen_range(self, upper: int) -> int:
        """Uniform integer in [0, upper) drawn from 64-bit words."""
        return self._sample(upper, 64)

    def gen_index(self, upper: int) -> int:
        """Uniform index in [0, upper); 32-bit words when the bound fits."""
        return self._sample(upper, 32 if upper <= MASK32 else 64)

    def shuffle(self, items: MutableSequence[T]) -> None:
        for i in range(len(items) - 1, 0, -1):
            j = self.gen_index(i + 1)
            items[i], items[j] = items[j], items[i]

    def _sample(self, upper: int, bits: int) -> int:
        if upper <= 0:
            raise ValueError("cannot sample from an empty range")
        mask = (1 << bits) - 1
        leading_zeros = bits - upper.bit_length()
        zone = ((upper << leading_zeros) & mask) - 1
        draw = self.next_u32 if bits == 32 else self.next_u64
        while True:
            product = draw() * upper
            if (product & mask) <= zone:
                return product >> bits


__all__ = ["ChaChaRng", "expand_seed"]
