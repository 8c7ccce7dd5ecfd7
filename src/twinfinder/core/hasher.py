"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements file fingerprinting with pluggable streaming hash algorithms.

TwinHash is the default algorithm: a non-cryptographic 128-bit digest built from
two 64-bit accumulators fed byte by byte. It is tuned for a low accidental
collision rate inside one scan, not for resisting forged collisions.
"""

from typing import BinaryIO
import xxhash
from twinfinder.core.interfaces import Hasher, HashAlgorithm, HashState

MASK64 = 0xFFFFFFFFFFFFFFFF

FNV_OFFSET_BASIS = 0xcbf29ce484222325
FNV_PRIME = 0x100000001B3
MURMUR_MULTIPLIER = 0xC6A4A7935BD1E995

SEED1 = 0xcbf29ce484222325
SEED2 = 0x84222325cbf29ce4

SALT_LABEL = "deduplicator"
BUFFER_SIZE = 4096


def fnv1a_64(data: bytes) -> int:
    """Standard 64-bit FNV-1a."""
    h = FNV_OFFSET_BASIS
    for b in data:
        h ^= b
        h = (h * FNV_PRIME) & MASK64
    return h


SALT = fnv1a_64(SALT_LABEL.encode("utf-8"))


def rotl64(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (64 - shift))) & MASK64


def rotr64(value: int, shift: int) -> int:
    return ((value >> shift) | (value << (64 - shift))) & MASK64


class TwinHash:
    """
    Incremental 128-bit hash with a hashlib-like interface.

    The mix is strictly sequential per byte, so the digest does not depend on
    how the input is split across update() calls.
    """
    name = "twin128"
    digest_size = 16

    def __init__(self, data: bytes = b""):
        self._acc1 = SEED1
        self._acc2 = SEED2
        self._total = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        acc1 = self._acc1
        acc2 = self._acc2
        total = self._total
        salt_low = SALT & 0xFF

        for b in data:
            acc1 ^= b ^ salt_low
            acc1 = (acc1 * FNV_PRIME) & MASK64
            acc1 = ((acc1 << 13) | (acc1 >> 51)) & MASK64

            acc2 = (acc2 + b + (acc1 ^ total)) & MASK64
            acc2 = (acc2 * MURMUR_MULTIPLIER) & MASK64
            acc2 = ((acc2 >> 17) | (acc2 << 47)) & MASK64

            total += 1

        self._acc1 = acc1
        self._acc2 = acc2
        self._total = total

    def _final(self):
        low = (self._acc1 ^ self._acc2) ^ ((self._total * SALT) & MASK64)
        high = rotl64(self._acc1, 32) ^ rotr64(self._acc2, 32)
        return low, high

    def hexdigest(self) -> str:
        # Each half is printed without zero padding.
        low, high = self._final()
        return format(low, "x") + format(high, "x")


class TwinHashAlgorithmImpl(HashAlgorithm):
    @staticmethod
    def new() -> HashState:
        return TwinHash()


# Use the same way to implement and use any other hashing algorithm
class XXHash128AlgorithmImpl(HashAlgorithm):
    @staticmethod
    def new() -> HashState:
        return xxhash.xxh3_128()


def fingerprint(stream: BinaryIO, algorithm: HashAlgorithm = None, chunk_size: int = BUFFER_SIZE) -> str:
    """Fingerprints an open binary stream, reading it to the end."""
    state = (algorithm or TwinHashAlgorithmImpl()).new()
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        state.update(chunk)
    return state.hexdigest()


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    Streams the file in fixed-size chunks; I/O errors propagate to the caller.
    """

    def __init__(self, algorithm: HashAlgorithm = None, chunk_size: int = BUFFER_SIZE):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.algorithm = algorithm or TwinHashAlgorithmImpl()
        self.chunk_size = chunk_size

    def compute_fingerprint(self, path: str) -> str:
        with open(path, "rb") as f:
            return fingerprint(f, self.algorithm, self.chunk_size)
