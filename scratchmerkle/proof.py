from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from .crypto import Hasher, default_hasher
from .errors import EmptyInput, EmptyProof, LeafNotFound
from .tree import MerkleTree, build_tree
from .utils import Leaf, parse_digest, to_bytes

LEFT = "left"
RIGHT = "right"
_SIDES = (LEFT, RIGHT)


@dataclass(frozen=True)
class ProofElement:
    side: str
    sibling: bytes

    def __post_init__(self) -> None:
        if self.side not in _SIDES:
            raise ValueError(f"invalid proof side: {self.side!r}")

    def to_dict(self) -> dict:
        return {"side": self.side, "sibling": self.sibling.hex()}

    @staticmethod
    def from_dict(data: dict) -> "ProofElement":
        if not isinstance(data, dict) or "side" not in data or "sibling" not in data:
            raise ValueError(f"invalid proof element: {data!r}")
        return ProofElement(side=data["side"], sibling=parse_digest(data["sibling"]))


@dataclass(frozen=True)
class Proof:
    """Sibling path from a leaf up to the level just below the root."""

    elements: Tuple[ProofElement, ...] = ()

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self):
        return iter(self.elements)

    def __getitem__(self, index: int) -> ProofElement:
        return self.elements[index]

    def to_dict(self) -> dict:
        return {"proof": [e.to_dict() for e in self.elements]}

    @staticmethod
    def from_dict(data: Union[dict, list]) -> "Proof":
        if isinstance(data, dict):
            if "proof" not in data:
                raise ValueError("missing proof key")
            items = data["proof"]
        else:
            items = data
        if not isinstance(items, list):
            raise ValueError("proof must be a list")
        return Proof(tuple(ProofElement.from_dict(item) for item in items))


def proof_from_tree(tree: MerkleTree, target: Leaf) -> Proof:
    current = tree.hasher.digest(to_bytes(target))
    if current not in tree.levels[0]:
        raise LeafNotFound(to_bytes(target))
    elements: List[ProofElement] = []
    level = 0
    while len(tree.levels[level]) > 1:
        assert level + 1 < len(tree.levels), "proof walked past the root"
        hashes = tree.levels[level]
        assert current in hashes, f"carried hash missing from level {level}"
        index = hashes.index(current)
        parity = index % 2
        if parity == 1:
            elements.append(ProofElement(LEFT, hashes[index - 1]))
        else:
            elements.append(ProofElement(RIGHT, hashes[index + 1]))
        current = tree.levels[level + 1][(index - parity) // 2]
        level += 1
    return Proof(tuple(elements))


def generate_proof(
    leaves: Iterable[Leaf],
    target: Leaf,
    hasher: Optional[Hasher] = None,
    tree: Optional[MerkleTree] = None,
) -> Proof:
    """Build the inclusion proof for ``target``.

    A pre-built ``tree`` is used as is; ``hasher`` may be omitted then, and
    must match ``tree.hasher`` when given.
    """
    items = [to_bytes(leaf) for leaf in leaves]
    if not items:
        raise EmptyInput()
    target_bytes = to_bytes(target)
    if target_bytes not in items:
        raise LeafNotFound(target_bytes)
    if tree is None:
        tree = build_tree(items, hasher)
    elif hasher is not None and hasher != tree.hasher:
        raise ValueError("hasher does not match the tree's hasher")
    return proof_from_tree(tree, target_bytes)


def verify_root(leaf: Leaf, proof: Proof, hasher: Optional[Hasher] = None) -> bytes:
    """Recompute the root implied by ``leaf`` and ``proof``.

    Raises EmptyProof for a zero-length proof: a single-leaf tree has no
    siblings, and its root is simply the leaf digest.
    """
    if not len(proof):
        raise EmptyProof()
    hasher = hasher or default_hasher()
    h = hasher.digest(to_bytes(leaf))
    for element in proof:
        if element.side == LEFT:
            h = hasher.combine(element.sibling, h)
        else:
            h = hasher.combine(h, element.sibling)
    return h


def verify_proof(
    leaf: Leaf,
    proof: Proof,
    root: Union[bytes, str],
    hasher: Optional[Hasher] = None,
) -> bool:
    hasher = hasher or default_hasher()
    expected = parse_digest(root)
    if not len(proof):
        return hasher.digest(to_bytes(leaf)) == expected
    return verify_root(leaf, proof, hasher) == expected
