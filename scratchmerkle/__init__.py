from .crypto import Hasher, default_hasher
from .errors import EmptyInput, EmptyProof, LeafNotFound, MerkleError
from .proof import LEFT, RIGHT, Proof, ProofElement, generate_proof, verify_proof, verify_root
from .tree import MerkleTree, build_tree, merkle_root

__version__ = "0.1.0"

__all__ = [
    "Hasher",
    "default_hasher",
    "MerkleError",
    "EmptyInput",
    "EmptyProof",
    "LeafNotFound",
    "MerkleTree",
    "build_tree",
    "merkle_root",
    "LEFT",
    "RIGHT",
    "Proof",
    "ProofElement",
    "generate_proof",
    "verify_root",
    "verify_proof",
]
