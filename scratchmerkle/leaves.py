import random
import string
from typing import List, Optional

from . import config

ALPHABET = string.ascii_letters + string.digits


def random_leaf(length: int, rng: random.Random) -> bytes:
    return "".join(rng.choice(ALPHABET) for _ in range(length)).encode()


def random_leaves(
    count: int,
    length: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[bytes]:
    if count < 1:
        raise ValueError("count must be > 0")
    length = config.LEAF_LENGTH if length is None else length
    if length < 1:
        raise ValueError("length must be > 0")
    rng = rng or random.Random()
    return [random_leaf(length, rng) for _ in range(count)]
