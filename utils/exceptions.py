class LedgerReadModelError(Exception):
    pass


class ReferenceMismatchError(LedgerReadModelError):
    """A block or transaction reference could not be matched in the graph store."""

    code = "REFERENCE_MISMATCH"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.code)
        self.message = message or self.code


class ReferenceBestBlockMismatchError(ReferenceMismatchError):
    """The "until" block has no transaction-bearing ancestor."""

    code = "REFERENCE_BEST_BLOCK_MISMATCH"


class ReferenceBlockMismatchError(ReferenceMismatchError):
    """The "after" block or transaction could not be resolved."""

    code = "REFERENCE_BLOCK_MISMATCH"
