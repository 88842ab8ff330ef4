from typing import Union

Leaf = Union[bytes, bytearray, str]


def to_bytes(leaf: Leaf) -> bytes:
    if isinstance(leaf, str):
        return leaf.encode("utf-8")
    if isinstance(leaf, (bytes, bytearray)):
        return bytes(leaf)
    raise TypeError(f"leaf must be bytes or str, not {type(leaf).__name__}")


def parse_digest(value: Union[bytes, str]) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    try:
        return bytes.fromhex(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid hex digest: {value!r}") from exc
