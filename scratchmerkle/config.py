import os


_HASHES = {"sha256", "sha512", "sha3_256", "blake2s", "blake2b"}
_CONCAT_MODES = {"hex", "raw"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


def _choice(name: str, default: str, allowed: set, upper: bool = False) -> str:
    value = os.getenv(name, default).strip()
    value = value.upper() if upper else value.lower()
    if value not in allowed:
        return default
    return value


def _positive_int(name: str, default: int) -> int:
    try:
        value = int(os.getenv(name, str(default)))
    except ValueError:
        return default
    return value if value > 0 else default


HASH_ALGO = _choice("SCRATCHMERKLE_HASH", "sha256", _HASHES)
CONCAT_MODE = _choice("SCRATCHMERKLE_CONCAT", "hex", _CONCAT_MODES)
LEAF_LENGTH = _positive_int("SCRATCHMERKLE_LEAF_LENGTH", 16)
LOG_LEVEL = _choice("SCRATCHMERKLE_LOG_LEVEL", "WARNING", _LOG_LEVELS, upper=True)

SUPPORTED_HASHES = sorted(_HASHES)
SUPPORTED_CONCAT_MODES = sorted(_CONCAT_MODES)
