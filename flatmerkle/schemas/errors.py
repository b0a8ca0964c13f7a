"""
Schemas - Error Taxonomy
File: errors.py

Purpose: Standard error taxonomy for Merkle tree construction and proofs.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.

Every error here is a local validation or state error. None of them is
retryable: the same call on the same tree always fails the same way.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Input Errors
    NIL_BLOCK = "NIL_BLOCK"
    BLOCK_NOT_FOUND = "BLOCK_NOT_FOUND"

    # Lifecycle Errors
    EMPTY_TREE = "EMPTY_TREE"
    ALREADY_FINALIZED = "ALREADY_FINALIZED"
    NOT_FINALIZED = "NOT_FINALIZED"

    # Commitment Errors
    VERIFICATION_MISMATCH = "VERIFICATION_MISMATCH"
    ROOT_MISMATCH = "ROOT_MISMATCH"
    HASH_COMPUTATION_FAILURE = "HASH_COMPUTATION_FAILURE"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class MerkleError(BaseModel):
    """
    Base error model for structured error reporting.

    Lets callers such as the CLI serialize a failure without
    carrying the exception object around.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.NIL_BLOCK],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "MerkleException":
        """Convert this error model to a raised exception."""
        return MerkleException(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )


class VerificationError(MerkleError):
    """Error model for a proof step that failed to reconstruct."""

    code: str = Field(default=ErrorCodes.VERIFICATION_MISMATCH)
    step: int | None = Field(
        default=None,
        description="Index of the proof entry that failed",
    )
    computed: str | None = Field(
        default=None,
        description="Reconstructed digest (0x hex)",
    )
    expected: str | None = Field(
        default=None,
        description="Digest stored in the tree (0x hex)",
    )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class MerkleException(Exception):
    """
    Base exception for all Merkle tree errors.

    This exception carries structured error information and can be
    converted to/from MerkleError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "MERKLE_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> MerkleError:
        """Convert this exception to a MerkleError model."""
        return MerkleError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class NilBlockException(MerkleException):
    """Exception raised when an absent block is passed in."""

    def __init__(
        self,
        message: str = "Block cannot be None",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.NIL_BLOCK,
            details=details,
            retryable=False,
        )


class EmptyTreeException(MerkleException):
    """Exception raised when a tree is built from zero blocks."""

    def __init__(
        self,
        message: str = "Merkle tree cannot be empty; insert some blocks",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.EMPTY_TREE,
            details=details,
            retryable=False,
        )


class AlreadyFinalizedException(MerkleException):
    """Exception raised when a finalized tree is mutated or finalized again."""

    def __init__(
        self,
        message: str = "Merkle tree already finalized",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.ALREADY_FINALIZED,
            details=details,
            retryable=False,
        )


class NotFinalizedException(MerkleException):
    """Exception raised when a tree is queried before finalize()."""

    def __init__(
        self,
        message: str = "Merkle tree not finalized",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.NOT_FINALIZED,
            details=details,
            retryable=False,
        )


class BlockNotFoundException(MerkleException):
    """Exception raised when a block is not among the inserted blocks."""

    def __init__(
        self,
        message: str,
        block_hex: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if block_hex:
            full_details["block"] = block_hex
        super().__init__(
            message=message,
            code=ErrorCodes.BLOCK_NOT_FOUND,
            details=full_details,
            retryable=False,
        )


class VerificationMismatchException(MerkleException):
    """
    Exception raised when a proof step does not reconstruct the stored node.

    Attributes:
        step: Index of the failing proof entry
        computed: Digest reconstructed from the block and proof
        expected: Digest stored in the tree at the parent index
    """

    def __init__(
        self,
        message: str,
        step: int,
        computed: bytes,
        expected: bytes,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["step"] = step
        full_details["computed"] = "0x" + computed.hex()
        full_details["expected"] = "0x" + expected.hex()
        super().__init__(
            message=message,
            code=ErrorCodes.VERIFICATION_MISMATCH,
            details=full_details,
            retryable=False,
        )
        self.step = step
        self.computed = computed
        self.expected = expected

    def to_error_model(self) -> VerificationError:
        return VerificationError(
            message=self.message,
            details=self.details,
            step=self.step,
            computed=self.details["computed"],
            expected=self.details["expected"],
        )


class RootMismatchException(MerkleException):
    """Exception raised when a tree root differs from a trusted root."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.ROOT_MISMATCH,
            details=details,
            retryable=False,
        )


class HashComputationException(MerkleException):
    """Exception raised when the digest function fails."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.HASH_COMPUTATION_FAILURE,
            details=details,
            retryable=False,
        )
