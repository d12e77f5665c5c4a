"""
Base Exception Classes

Core exception hierarchy for the SDK.
"""

from enum import Enum
from typing import Optional, Dict, Any


class BattleNetError(Exception):
    """Base exception for all SDK errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        self.message = message
        self.details = details or {}
        self.original_exception = original_exception
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }


class ErrorType(Enum):
    """Kinds of failure a web service call can produce."""

    MALFORMED_REQUEST = "malformed_request"
    MALFORMED_BODY = "malformed_body"
    SERVER_ERROR = "server_error"
    UNEXPECTED_RESPONSE = "unexpected_response"
    DESERIALIZATION_FAILURE = "deserialization_failure"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NO_NETWORK = "no_network"

    @property
    def description(self) -> str:
        """User friendly description."""
        return _DESCRIPTIONS[self]

    @property
    def debug_description(self) -> str:
        """Verbose description naming the error kind."""
        return f"DEBUG ({self.value}): {_DEBUG_DESCRIPTIONS[self]}"

    @property
    def code(self) -> int:
        """Code used when the server did not supply one."""
        if self is ErrorType.UNAUTHORIZED:
            return 401
        if self is ErrorType.FORBIDDEN:
            return 403
        if self is ErrorType.SERVER_ERROR:
            return 599
        return 499


_DESCRIPTIONS = {
    ErrorType.MALFORMED_REQUEST: "There was a problem making the request. Please change and try again.",
    ErrorType.MALFORMED_BODY: "There was a problem with your input. Please change and try again.",
    ErrorType.SERVER_ERROR: "The web service returned an unknown error.",
    ErrorType.UNEXPECTED_RESPONSE: "The web service returned unexpected data.",
    ErrorType.DESERIALIZATION_FAILURE: "The web service response could not be parsed.",
    ErrorType.UNAUTHORIZED: "Unauthorized, please login again.",
    ErrorType.FORBIDDEN: "You have not granted this app permission to access this data.",
    ErrorType.NO_NETWORK: (
        "A network connection could not be established. "
        "Please try again when you have a sufficient internet connection."
    ),
}

_DEBUG_DESCRIPTIONS = {
    ErrorType.MALFORMED_REQUEST: "The request could not be made because of a malformed url or invalid header.",
    ErrorType.MALFORMED_BODY: "The request body could not be formed. Check for any invalid input.",
    ErrorType.SERVER_ERROR: "The web service returned an unknown error, like a 500.",
    ErrorType.UNEXPECTED_RESPONSE: "The response data did not have the expected format, value, or type.",
    ErrorType.DESERIALIZATION_FAILURE: "The data could not be read into the expected model.",
    ErrorType.UNAUTHORIZED: "Unauthorized, please login again.",
    ErrorType.FORBIDDEN: "You have not granted this app permission to access this data.",
    ErrorType.NO_NETWORK: "A network connection could not be established.",
}


class HTTPError(BattleNetError):
    """
    Failure of a web service call.

    Carries the error kind, the status code returned by the web service (or
    the default code of the kind) and a human readable message.
    """

    def __init__(
        self,
        error_type: ErrorType,
        code: Optional[int] = None,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(
            message or error_type.description,
            details=details,
            original_exception=original_exception
        )
        self.type = error_type
        self.code = code

        self.details["type"] = error_type.value
        self.details["code"] = code

    @classmethod
    def of(cls, error_type: ErrorType, message: Optional[str] = None, **kwargs) -> "HTTPError":
        """Create an error with the default code of its kind."""
        return cls(error_type, code=error_type.code, message=message, **kwargs)

    @classmethod
    def from_status(cls, status_code: int, message: Optional[str] = None) -> "HTTPError":
        """Map a non-2xx status code to an error."""
        if status_code == 401:
            error_type = ErrorType.UNAUTHORIZED
        elif status_code == 403:
            error_type = ErrorType.FORBIDDEN
        else:
            error_type = ErrorType.SERVER_ERROR
        return cls(error_type, code=status_code, message=message)

    @property
    def debug_description(self) -> str:
        return self.type.debug_description

    def display_message(self, debug: bool = False) -> str:
        """Message for the user, with the verbose variant in debug mode."""
        if debug:
            return f"{self.message}\n\n{self.debug_description}"
        return self.message

    def __repr__(self) -> str:
        return f"HTTPError(type={self.type.value}, code={self.code}, message={self.message!r})"


class ConfigurationError(BattleNetError):
    """Configuration-related errors."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.config_key = config_key

        # Add to details
        self.details["config_key"] = config_key
