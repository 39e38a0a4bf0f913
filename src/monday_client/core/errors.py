from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

if TYPE_CHECKING:
    from ..models import GraphQLErrorEntry
    from .response import Response

Code = Union[int, str]


class MondayClientError(Exception):
    """Base error for client failures."""


class MondayTransportError(MondayClientError):
    """The HTTP exchange itself failed (connection refused, TLS, protocol)."""


class MondayTimeoutError(MondayTransportError):
    """open_timeout or read_timeout elapsed before a response arrived."""


class MondayParseError(MondayClientError):
    pass


class QueryBuildError(ValueError):
    """Raised when arguments or selections cannot be rendered as GraphQL."""


class MondayError(MondayClientError):
    """
    A failure reported by the monday.com API.

    Attributes:
        message: caller prefix and/or the API's own message, or None.
        code: explicit code, else body ``status_code``, else HTTP status.
        response: the original Response (None when raised by hand).
        error_code: the API error code string that selected this class, if any.
    """

    default_message = "monday.com API request failed"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        response: Optional["Response"] = None,
        code: Optional[Code] = None,
        error_code: Optional[str] = None,
    ):
        self.response = response
        self.error_code = error_code
        self.message = self._build_message(message)
        self.code = self._build_code(code)
        super().__init__(self.message or self.default_message)

    @property
    def error_data(self) -> Dict[str, Any]:
        body = self._body()
        data = body.get("error_data")
        return data if data is not None else {}

    @property
    def graphql_errors(self) -> List["GraphQLErrorEntry"]:
        from ..models import GraphQLErrorEntry

        return GraphQLErrorEntry.list_from(self._body())

    def _body(self) -> Dict[str, Any]:
        if self.response is None or not isinstance(self.response.body, dict):
            return {}
        return self.response.body

    def _build_message(self, message: Optional[str]) -> Optional[str]:
        detail = self._response_message()
        if message is None:
            return detail
        if detail is None:
            return message
        return f"{message}: {detail}"

    def _build_code(self, code: Optional[Code]) -> Optional[Code]:
        if code is not None:
            return code
        status_code = self._body().get("status_code")
        if status_code is not None:
            return status_code
        return self.response.status if self.response is not None else None

    def _response_message(self) -> Optional[str]:
        if self.response is None:
            return None
        body = self._body()
        if body.get("error_message") is not None:
            return str(body["error_message"])
        if body.get("errors") is not None:
            return json.dumps(body["errors"], ensure_ascii=False)
        return None


class InternalServerError(MondayError):
    """HTTP 500 or ``INTERNAL_SERVER_ERROR``."""


class AuthorizationError(MondayError):
    """HTTP 401/403, ``UserUnauthorizedException`` or ``USER_UNAUTHORIZED``."""


class RateLimitError(MondayError):
    """HTTP 429 or ``COMPLEXITY_BUDGET_EXHAUSTED``."""


class ComplexityError(RateLimitError):
    """``ComplexityException``: a single query exceeded its complexity budget."""


class ResourceNotFoundError(MondayError):
    """HTTP 404 or ``ResourceNotFoundException``."""


class InvalidRequestError(MondayError):
    """HTTP 400 or one of the invalid-argument error codes."""


__all__ = [
    "MondayClientError",
    "MondayTransportError",
    "MondayTimeoutError",
    "MondayParseError",
    "QueryBuildError",
    "MondayError",
    "InternalServerError",
    "AuthorizationError",
    "RateLimitError",
    "ComplexityError",
    "ResourceNotFoundError",
    "InvalidRequestError",
]
