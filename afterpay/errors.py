from __future__ import annotations
from typing import Any, Dict, Optional

from .debug import dprint


class AfterpaySDKError(Exception):
    """Base exception for all Afterpay SDK errors."""
    pass


class AfterpayConfigError(AfterpaySDKError):
    """Raised when configuration/credentials are invalid or missing."""
    pass


class InvalidArgumentError(AfterpaySDKError, ValueError):
    """
    Raised synchronously when a setter receives a value of the wrong type
    or an unsupported value (e.g. an unknown API environment).

    Setters raise before assigning, so the target object is left untouched.
    """
    pass


class ParsingError(AfterpaySDKError):
    """
    Raised when a body that declares itself JSON cannot be decoded.

    Attributes
    ----------
    message : str
        Diagnostic message from the JSON decoder.
    code : int
        Numeric diagnostic from the decoder: the character offset where
        decoding failed, or 0 when the document decoded to ``null``.
    content_type : Optional[str]
        Content-Type of the message that failed, if known.
    """

    def __init__(self, message: str, code: int = 0, *, content_type: Optional[str] = None):
        self.message = message
        self.code = int(code)
        self.content_type = content_type

        dprint("ParsingError", {"message": self.message, "code": self.code, "content_type": content_type})

        super().__init__(self._message())

    def _message(self) -> str:
        ct = f" ({self.content_type})" if self.content_type else ""
        return f"Failed to parse body{ct}: {self.message} [code={self.code}]"

    def __repr__(self) -> str:
        return f"ParsingError(message={self.message!r}, code={self.code!r})"

    def to_dict(self) -> Dict[str, Any]:
        """Summary for logs; never includes the body itself."""
        return {
            "message": self.message,
            "code": self.code,
            "content_type": self.content_type,
        }


def type_name(value: Any) -> str:
    """Short type name used in 'Expected string; X given' messages."""
    return type(value).__name__


__all__ = [
    "AfterpaySDKError",
    "AfterpayConfigError",
    "InvalidArgumentError",
    "ParsingError",
    "type_name",
]
