import random

import pytest

from scratchmerkle import Hasher, LeafNotFound, build_tree, generate_proof, verify_proof


def random_leaf(rng):
    return bytes(rng.randint(0, 255) for _ in range(rng.randint(0, 40)))


def test_fuzz_round_trip():
    rng = random.Random(1234)
    for _ in range(60):
        hasher = Hasher(rng.choice(["sha256", "sha3_256", "blake2b"]), rng.choice(["hex", "raw"]))
        leaves = [random_leaf(rng) for _ in range(rng.randint(1, 33))]
        tree = build_tree(leaves, hasher)
        target = rng.choice(leaves)
        proof = generate_proof(leaves, target, hasher)
        assert verify_proof(target, proof, tree.root, hasher)


def test_fuzz_absent_leaf():
    rng = random.Random(99)
    for _ in range(30):
        leaves = [random_leaf(rng) for _ in range(rng.randint(1, 10))]
        with pytest.raises(LeafNotFound):
            # longer than any generated leaf
            generate_proof(leaves, b"\xff" * 41)
