from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

from .crypto import Hasher, default_hasher
from .errors import EmptyInput
from .utils import Leaf, to_bytes

if TYPE_CHECKING:
    from .proof import Proof

Level = Tuple[bytes, ...]


def _pad(level: List[bytes]) -> Level:
    # odd levels above the root repeat their last digest so every node pairs
    if len(level) > 1 and len(level) % 2 == 1:
        level.append(level[-1])
    return tuple(level)


@dataclass(frozen=True)
class MerkleTree:
    """Immutable Merkle tree, stored level by level.

    ``levels[0]`` holds the leaf digests in input order and ``levels[-1]``
    holds only the root. Any level of odd length above one already carries
    its duplicated last digest, so ``len(levels[0])`` exceeds ``leaf_count``
    by one when the leaf count is odd.
    """

    levels: Tuple[Level, ...]
    leaf_count: int
    hasher: Hasher

    @property
    def root(self) -> bytes:
        return self.levels[-1][0]

    @property
    def root_hex(self) -> str:
        return self.root.hex()

    @property
    def height(self) -> int:
        return len(self.levels) - 1

    def level_hex(self, index: int) -> List[str]:
        return [h.hex() for h in self.levels[index]]

    def proof(self, target: Leaf) -> "Proof":
        from .proof import proof_from_tree

        return proof_from_tree(self, target)

    def to_dict(self) -> dict:
        return {
            "algo": self.hasher.algo,
            "concat": self.hasher.concat,
            "leaf_count": self.leaf_count,
            "root": self.root_hex,
            "levels": [self.level_hex(i) for i in range(len(self.levels))],
        }


def build_tree(leaves: Iterable[Leaf], hasher: Optional[Hasher] = None) -> MerkleTree:
    hasher = hasher or default_hasher()
    items = [to_bytes(leaf) for leaf in leaves]
    if not items:
        raise EmptyInput()
    level = _pad([hasher.digest(item) for item in items])
    levels = [level]
    while len(level) > 1:
        next_level = []
        for i in range(0, len(level), 2):
            next_level.append(hasher.combine(level[i], level[i + 1]))
        level = _pad(next_level)
        levels.append(level)
    return MerkleTree(levels=tuple(levels), leaf_count=len(items), hasher=hasher)


def merkle_root(leaves: Iterable[Leaf], hasher: Optional[Hasher] = None) -> bytes:
    return build_tree(leaves, hasher).root
