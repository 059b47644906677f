"""Error types raised by the codec and the advertisement assembler."""

from typing import Optional


class AppleBleError(Exception):
    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code


class TruncatedInputError(AppleBleError):
    """Decode was given fewer bytes than the message layout requires."""

    def __init__(self, needed: int, received: int, kind: str = "message"):
        super().__init__(
            "truncated_input",
            f"Truncated {kind}: need at least {needed} bytes, got {received}",
        )
        self.needed = needed
        self.received = received


class ValidationRejectedError(AppleBleError):
    def __init__(self, message: str):
        super().__init__("validation_rejected", message)


class TransportError(AppleBleError):
    """The advertising transport failed; the original exception is kept on ``cause``."""

    def __init__(self, operation: str, cause: Optional[BaseException] = None):
        detail = f": {cause}" if cause is not None else ""
        super().__init__("transport_failure", f"Transport failed to {operation}{detail}")
        self.operation = operation
        self.cause = cause
