import argparse
import json
import logging
import random
from typing import List, Optional

from . import config
from .crypto import Hasher
from .errors import MerkleError
from .leaves import random_leaves
from .proof import verify_proof
from .tree import MerkleTree, build_tree

logger = logging.getLogger(__name__)

USAGE_EXAMPLE = "command example:\n\n  scratchmerkle 100"


def parse_count(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"invalid integer {text!r}, {USAGE_EXAMPLE}"
        ) from exc
    if value < 1:
        raise argparse.ArgumentTypeError("The argument must be an integer greater than 0!")
    return value


def _log_levels(tree: MerkleTree) -> None:
    for i in range(len(tree.levels)):
        logger.debug("level = %d, hashes = %s", i, tree.level_hex(i))


def _prove(tree: MerkleTree, leaves: List[bytes], index: int) -> dict:
    if index < 0 or index >= len(leaves):
        raise SystemExit(f"Leaf index out of range (0..{len(leaves) - 1})")
    leaf = leaves[index]
    proof = tree.proof(leaf)
    return {
        "root": tree.root_hex,
        "index": index,
        "leaf": leaf.decode(),
        "proof": proof.to_dict()["proof"],
        "valid": verify_proof(leaf, proof, tree.root, tree.hasher),
    }


def run(args: argparse.Namespace) -> None:
    rng = random.Random(args.seed)
    leaves = random_leaves(args.count, args.leaf_length, rng)
    hasher = Hasher(algo=args.hash, concat=args.concat)
    try:
        tree = build_tree(leaves, hasher)
    except MerkleError as exc:
        raise SystemExit(str(exc)) from exc
    logger.info("built tree: leaves=%d height=%d algo=%s concat=%s",
                tree.leaf_count, tree.height, hasher.algo, hasher.concat)
    _log_levels(tree)
    print(tree.root_hex)
    if args.prove is not None:
        print(json.dumps(_prove(tree, leaves, args.prove), indent=2))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="scratchmerkle",
        description="Build a Merkle tree over N random leaves and print its root.",
    )
    p.add_argument("count", type=parse_count, help="number of leaves (> 0)")
    p.add_argument("--seed", type=int, help="seed for reproducible leaves")
    p.add_argument("--leaf-length", type=parse_count, default=config.LEAF_LENGTH)
    p.add_argument("--hash", choices=config.SUPPORTED_HASHES, default=config.HASH_ALGO)
    p.add_argument("--concat", choices=config.SUPPORTED_CONCAT_MODES, default=config.CONCAT_MODE)
    p.add_argument("--prove", type=int, metavar="INDEX", help="print an inclusion proof for leaf INDEX")
    p.add_argument("-v", "--verbose", action="store_true", help="log every tree level")
    return p


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )
    run(args)


if __name__ == "__main__":
    main()
