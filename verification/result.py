from enum import Enum
from typing import NamedTuple, Optional, Type


class VerificationStatus(Enum):
    PENDING = "pending"
    VERIFIED = "verified"
    FAILED = "failed"
    TIMED_OUT = "timed out"


class VerificationResult(NamedTuple):
    """Terminal outcome of a verification status loop."""

    status: VerificationStatus
    detail: str
    attempts: int

    @property
    def verified(self) -> bool:
        return self.status is VerificationStatus.VERIFIED


#
# Errors
#


class VerificationError(Exception):
    """A verification attempt that did not end with verified source code."""

    hint = "Check the explorer message and the verification parameters."

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def __str__(self):
        return f"{self.detail}\n(hint) {self.hint}"


class SubmissionRejected(VerificationError):
    hint = (
        "The explorer refused the request; it is malformed, the API key is invalid, "
        "or the contract is already verified."
    )


class BytecodeMismatch(VerificationError):
    hint = (
        "Compiler version, optimizer settings or EVM version do not reproduce the "
        "on-chain bytecode; use the exact settings of the deployment build."
    )


class ArgumentEncodingError(VerificationError):
    hint = (
        "Constructor arguments must be the ABI-encoded hex of the deployment "
        "arguments, without the 0x prefix."
    )


class SourceNotFound(VerificationError):
    hint = (
        "The contract name does not match a contract in the submitted source; "
        "check the name and that the flattened file is complete."
    )


class VerificationTimeout(VerificationError):
    hint = (
        "No terminal status before the attempt ceiling; check the status again later "
        "with the returned guid."
    )


# Ordered; the first matching fragment wins
_FAILURE_FRAGMENTS = (
    ("constructor argument", ArgumentEncodingError),
    ("constructorarguements", ArgumentEncodingError),
    ("unable to locate contractcode", SourceNotFound),
    ("unable to locate contractname", SourceNotFound),
    ("contract name", SourceNotFound),
    ("bytecode", BytecodeMismatch),
    ("already verified", SubmissionRejected),
)


def diagnose(detail: str) -> Type[VerificationError]:
    """Returns the error kind matching an explorer failure message."""
    lowered = detail.lower()
    for fragment, error_class in _FAILURE_FRAGMENTS:
        if fragment in lowered:
            return error_class
    return VerificationError


def raise_for_result(result: VerificationResult) -> None:
    """Raises the matching error unless the result is verified."""
    if result.verified:
        return
    if result.status is VerificationStatus.TIMED_OUT:
        raise VerificationTimeout(
            f"No terminal status after {result.attempts} attempts (last: '{result.detail}')"
        )
    error_class = diagnose(result.detail)
    raise error_class(result.detail)


def explorer_code_url(explorer_url: Optional[str], address: str) -> Optional[str]:
    if not explorer_url:
        return None
    return f"{explorer_url}/address/{address}#code"
