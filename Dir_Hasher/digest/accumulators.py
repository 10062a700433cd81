"""
Digest accumulators behind one incremental interface.

Every algorithm the pipeline knows about is registered here as a
DigestAlgorithm whose factory returns an IncrementalDigest:

    update(data) -> None
    finish()     -> bytes

Native streaming hashers are wrapped by HashObjectDigest, extendable
output functions by XofDigest, and algorithms that only offer a
one-shot `func(data) -> bytes` by OneShotDigest, which spools the
stream so the final value covers every byte passed to update().
"""

from dataclasses import dataclass
import hashlib
import mmap
import tempfile
from typing import Callable, Dict, List, Optional, Protocol

import mmh3
import whirlpool
import xxhash
from blake3 import blake3
from Crypto.Hash import KangarooTwelve, RIPEMD160


# ============================================================
# Categories
# ============================================================

MODERN = "modern"
XOF = "xof"
LEGACY = "legacy"
STANDARD = "standard"
FAST = "fast"

CATEGORY_ORDER = (MODERN, XOF, LEGACY, STANDARD, FAST)

CATEGORY_TITLES = {
    MODERN: "Modern general-purpose hashes",
    XOF: "Extendable-output function",
    LEGACY: "Legacy digests (compatibility auditing)",
    STANDARD: "Standard fixed-output digests",
    FAST: "Non-cryptographic fast hashes",
}

XOF_OUTPUT_BYTES = 32
SPOOL_MEMORY_LIMIT = 8 * 1024 * 1024


# ============================================================
# Incremental interface + adapters
# ============================================================

class IncrementalDigest(Protocol):
    def update(self, data: bytes) -> None:
        ...

    def finish(self) -> bytes:
        ...


class HashObjectDigest:
    """
    Adapter for hashlib-style objects (update() / digest()).
    """

    def __init__(self, hash_obj):
        self._hash = hash_obj

    def update(self, data: bytes) -> None:
        self._hash.update(data)

    def finish(self) -> bytes:
        return self._hash.digest()


class XofDigest:
    """
    Adapter for extendable-output functions (update() / read(n)).
    """

    def __init__(self, xof, length: int = XOF_OUTPUT_BYTES):
        self._xof = xof
        self._length = length

    def update(self, data: bytes) -> None:
        self._xof.update(data)

    def finish(self) -> bytes:
        return self._xof.read(self._length)


class OneShotDigest:
    """
    Adapter for algorithms that can only hash a complete buffer.

    Bytes are spooled in memory up to `memory_limit`, then to a
    temporary file. finish() hands the complete stream to `func`
    through a memory map so large spools are not copied.
    """

    def __init__(
        self,
        func: Callable[[bytes], bytes],
        *,
        memory_limit: int = SPOOL_MEMORY_LIMIT,
    ):
        self._func = func
        self._memory_limit = memory_limit
        self._spool = tempfile.SpooledTemporaryFile(max_size=memory_limit)
        self._size = 0
        self._finished = False

    def update(self, data: bytes) -> None:
        if self._finished:
            raise ValueError("digest already finished")
        self._spool.write(data)
        self._size += len(data)

    def finish(self) -> bytes:
        if self._finished:
            raise ValueError("digest already finished")
        self._finished = True

        try:
            if self._size <= self._memory_limit:
                self._spool.seek(0)
                return self._func(self._spool.read())

            self._spool.flush()
            with mmap.mmap(self._spool.fileno(), 0, access=mmap.ACCESS_READ) as view:
                return self._func(view)
        finally:
            self._spool.close()


# ============================================================
# Registry
# ============================================================

@dataclass(frozen=True)
class DigestAlgorithm:
    name: str
    label: str
    category: str
    factory: Callable[[], IncrementalDigest]

    def create(self) -> IncrementalDigest:
        return self.factory()


_REGISTRY: Dict[str, DigestAlgorithm] = {}


def register_algorithm(algorithm: DigestAlgorithm, *, replace: bool = False) -> DigestAlgorithm:
    if algorithm.category not in CATEGORY_ORDER:
        raise ValueError(f"Unknown digest category: {algorithm.category!r}")
    if algorithm.name in _REGISTRY and not replace:
        raise ValueError(f"Digest algorithm already registered: {algorithm.name}")
    _REGISTRY[algorithm.name] = algorithm
    return algorithm


def unregister_algorithm(name: str) -> None:
    _REGISTRY.pop(name, None)


def get_algorithm(name: str) -> DigestAlgorithm:
    try:
        return _REGISTRY[name]
    except KeyError:
        raise KeyError(f"Unknown digest algorithm: {name}") from None


def algorithm_names() -> List[str]:
    """
    Registered names, grouped by category in CATEGORY_ORDER and in
    registration order within a category.
    """
    ordered = sorted(
        _REGISTRY.values(),
        key=lambda a: CATEGORY_ORDER.index(a.category),
    )
    return [a.name for a in ordered]


def create_accumulators(names: Optional[List[str]] = None) -> Dict[str, IncrementalDigest]:
    names = names if names is not None else algorithm_names()
    return {name: get_algorithm(name).create() for name in names}


# ============================================================
# Default algorithm set
# ============================================================

DEFAULT_ALGORITHMS = (
    DigestAlgorithm(
        "blake3", "BLAKE3", MODERN,
        lambda: HashObjectDigest(blake3()),
    ),
    DigestAlgorithm(
        "blake2b", "BLAKE2b-256", MODERN,
        lambda: HashObjectDigest(hashlib.blake2b(digest_size=32)),
    ),
    DigestAlgorithm(
        "kangaroo12", "KangarooTwelve", XOF,
        lambda: XofDigest(KangarooTwelve.new(custom=b"")),
    ),
    DigestAlgorithm(
        "ripemd160", "RIPEMD-160", LEGACY,
        lambda: HashObjectDigest(RIPEMD160.new()),
    ),
    DigestAlgorithm(
        "whirlpool", "Whirlpool", LEGACY,
        lambda: HashObjectDigest(whirlpool.new(b"")),
    ),
    DigestAlgorithm(
        "sha3_256", "SHA3-256", STANDARD,
        lambda: HashObjectDigest(hashlib.sha3_256()),
    ),
    DigestAlgorithm(
        "sha512", "SHA-512", STANDARD,
        lambda: HashObjectDigest(hashlib.sha512()),
    ),
    DigestAlgorithm(
        "sha256", "SHA-256", STANDARD,
        lambda: HashObjectDigest(hashlib.sha256()),
    ),
    DigestAlgorithm(
        "xxh3", "XXH3-64", FAST,
        lambda: HashObjectDigest(xxhash.xxh3_64()),
    ),
    DigestAlgorithm(
        "xxhash64", "XXH64", FAST,
        lambda: HashObjectDigest(xxhash.xxh64()),
    ),
    DigestAlgorithm(
        "murmur3", "MurmurHash3 x64 128", FAST,
        lambda: HashObjectDigest(mmh3.mmh3_x64_128()),
    ),
)

for _algorithm in DEFAULT_ALGORITHMS:
    register_algorithm(_algorithm)

DEFAULT_ALGORITHM_NAMES = tuple(a.name for a in DEFAULT_ALGORITHMS)
