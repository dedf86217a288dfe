"""Error type shared by the DynamoDB and S3 client wrappers."""

from __future__ import annotations

from typing import Any, Dict

from botocore.exceptions import BotoCoreError, ClientError

_RETRYABLE_CODES = frozenset(
    {
        "ProvisionedThroughputExceededException",
        "ThrottlingException",
        "RequestLimitExceeded",
        "SlowDown",
        "InternalServerError",
    }
)


class StoreError(Exception):
    """Raised when a call to DynamoDB or S3 fails.

    Connectivity problems, throttling, rejected items and permission errors
    all surface as this one type; the original AWS code and message are kept
    so callers can report them verbatim.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str = "UnknownError",
        status_code: int | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.retryable = retryable

    @classmethod
    def from_boto(cls, exc: Exception) -> "StoreError":
        """Translate a boto3/botocore exception."""
        if isinstance(exc, ClientError):
            error = exc.response.get("Error", {})
            metadata = exc.response.get("ResponseMetadata", {})
            code = error.get("Code", "UnknownError")
            return cls(
                error.get("Message") or str(exc),
                code=code,
                status_code=metadata.get("HTTPStatusCode"),
                retryable=code in _RETRYABLE_CODES,
            )
        if isinstance(exc, BotoCoreError):
            return cls(str(exc), code=type(exc).__name__, retryable=True)
        return cls(str(exc))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize in the shape AWS SDK errors are usually rendered."""
        return {
            "message": self.message,
            "code": self.code,
            "statusCode": self.status_code,
            "retryable": self.retryable,
        }


__all__ = ["StoreError"]
