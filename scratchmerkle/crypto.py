from dataclasses import dataclass

try:
    from cryptography.hazmat.primitives import hashes
except Exception as exc:  # pragma: no cover - hard fail when dependency missing
    raise ImportError(
        "cryptography is required. Install with `python3 -m pip install cryptography`."
    ) from exc

from . import config

_ALGORITHMS = {
    "sha256": hashes.SHA256,
    "sha512": hashes.SHA512,
    "sha3_256": hashes.SHA3_256,
    "blake2s": lambda: hashes.BLAKE2s(32),
    "blake2b": lambda: hashes.BLAKE2b(64),
}


def _ensure_algo(algo: str) -> None:
    if algo not in _ALGORITHMS:
        raise ValueError(f"Unsupported hash algorithm: {algo}")


def _ensure_concat(concat: str) -> None:
    if concat not in ("hex", "raw"):
        raise ValueError(f"Unsupported concat mode: {concat}")


def hash_bytes(data: bytes, algo: str = "sha256") -> bytes:
    _ensure_algo(algo)
    h = hashes.Hash(_ALGORITHMS[algo]())
    h.update(data)
    return h.finalize()


def digest_size(algo: str = "sha256") -> int:
    _ensure_algo(algo)
    return _ALGORITHMS[algo]().digest_size


@dataclass(frozen=True)
class Hasher:
    """Leaf and node hashing for a tree.

    ``concat="hex"`` hashes the ASCII hex renderings of the two children
    joined together, ``concat="raw"`` hashes the joined digest bytes.
    Trees only interoperate when both sides agree on algo and concat.
    """

    algo: str = "sha256"
    concat: str = "hex"

    def __post_init__(self) -> None:
        _ensure_algo(self.algo)
        _ensure_concat(self.concat)

    @property
    def size(self) -> int:
        return digest_size(self.algo)

    def digest(self, data: bytes) -> bytes:
        return hash_bytes(data, self.algo)

    def combine(self, left: bytes, right: bytes) -> bytes:
        if self.concat == "hex":
            return hash_bytes((left.hex() + right.hex()).encode(), self.algo)
        return hash_bytes(left + right, self.algo)


def default_hasher() -> Hasher:
    return Hasher(algo=config.HASH_ALGO, concat=config.CONCAT_MODE)
