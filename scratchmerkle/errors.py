class MerkleError(ValueError):
    """Base class for expected, deterministic failures of the tree API."""


class EmptyInput(MerkleError):
    def __init__(self, message: str = "at least one leaf is required") -> None:
        super().__init__(message)


class LeafNotFound(MerkleError):
    def __init__(self, leaf: bytes) -> None:
        super().__init__(f"leaf not found: {leaf!r}")
        self.leaf = leaf


class EmptyProof(MerkleError):
    def __init__(self, message: str = "proof has no elements") -> None:
        super().__init__(message)
