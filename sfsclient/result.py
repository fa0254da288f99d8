"""Result codes and the exception that carries them."""

from __future__ import annotations

from enum import Enum


class ResultCode(Enum):
    """Outcome of an operation. The string value is the code's display name."""

    SUCCESS = "Success"

    # Generic errors
    INVALID_ARG = "InvalidArg"
    NOT_IMPL = "NotImpl"
    NOT_SET = "NotSet"
    OUT_OF_MEMORY = "OutOfMemory"
    UNEXPECTED = "Unexpected"

    # Connection errors
    CONNECTION_SETUP_FAILED = "ConnectionSetupFailed"
    CONNECTION_UNEXPECTED_ERROR = "ConnectionUnexpectedError"

    # HTTP errors
    HTTP_TIMEOUT = "HttpTimeout"
    HTTP_UNEXPECTED = "HttpUnexpected"
    HTTP_BAD_REQUEST = "HttpBadRequest"
    HTTP_NOT_FOUND = "HttpNotFound"
    HTTP_METHOD_NOT_ALLOWED = "HttpMethodNotAllowed"
    HTTP_TOO_MANY_REQUESTS = "HttpTooManyRequests"
    HTTP_SERVICE_NOT_AVAILABLE = "HttpServiceNotAvailable"

    # Service errors
    SERVICE_INVALID_RESPONSE = "ServiceInvalidResponse"
    SERVICE_UNEXPECTED_CONTENT_TYPE = "ServiceUnexpectedContentType"

    def __str__(self) -> str:
        return self.value


class Result:
    """A result code together with an optional message."""

    __slots__ = ("_code", "_message")

    def __init__(self, code: ResultCode, message: str = "") -> None:
        if not isinstance(code, ResultCode):
            raise TypeError(f"code must be a ResultCode, got {type(code).__name__}")
        self._code = code
        self._message = message or ""

    @property
    def code(self) -> ResultCode:
        return self._code

    @property
    def message(self) -> str:
        return self._message

    def is_success(self) -> bool:
        return self._code is ResultCode.SUCCESS

    def is_failure(self) -> bool:
        return not self.is_success()

    def __bool__(self) -> bool:
        return self.is_success()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ResultCode):
            return self._code is other
        if isinstance(other, Result):
            return self._code is other._code and self._message == other._message
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._code)

    def __str__(self) -> str:
        return str(self._code)

    def __repr__(self) -> str:
        return f"Result({self._code.name}, {self._message!r})"


class SFSError(Exception):
    """Raised when an operation fails; carries a failing Result."""

    def __init__(self, result: Result | ResultCode, message: str | None = None) -> None:
        if isinstance(result, ResultCode):
            result = Result(result, message or "")
        elif message is not None:
            result = Result(result.code, message)
        self.result = result
        super().__init__(f"[{result.code}] {result.message}" if result.message else str(result.code))

    @property
    def code(self) -> ResultCode:
        return self.result.code

    @property
    def message(self) -> str:
        return self.result.message