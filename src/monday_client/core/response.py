"""
Response envelope and failure classification.

monday.com reports failures on two channels: the HTTP status, and
``errors`` / ``error_code`` / ``error_message`` keys in the body. A 200
status is not proof of success, so the body is always inspected.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Type

import httpx

from .errors import (
    AuthorizationError,
    ComplexityError,
    InternalServerError,
    InvalidRequestError,
    MondayError,
    MondayParseError,
    RateLimitError,
    ResourceNotFoundError,
)
from .payload import dig

ERROR_OBJECT_KEYS = ("errors", "error_code", "error_message")

STATUS_CODE_EXCEPTIONS: Dict[int, Type[MondayError]] = {
    400: InvalidRequestError,
    401: AuthorizationError,
    403: AuthorizationError,
    404: ResourceNotFoundError,
    429: RateLimitError,
    500: InternalServerError,
}

RESPONSE_ERROR_EXCEPTIONS: Dict[str, Tuple[Type[MondayError], int]] = {
    "ComplexityException": (ComplexityError, 429),
    "COMPLEXITY_BUDGET_EXHAUSTED": (RateLimitError, 429),
    "UserUnauthorizedException": (AuthorizationError, 403),
    "USER_UNAUTHORIZED": (AuthorizationError, 403),
    "ResourceNotFoundException": (ResourceNotFoundError, 404),
    "InvalidUserIdException": (InvalidRequestError, 400),
    "InvalidVersionException": (InvalidRequestError, 400),
    "InvalidColumnIdException": (InvalidRequestError, 400),
    "InvalidItemIdException": (InvalidRequestError, 400),
    "InvalidBoardIdException": (InvalidRequestError, 400),
    "InvalidGroupIdException": (InvalidRequestError, 400),
    "InvalidArgumentException": (InvalidRequestError, 400),
    "CreateBoardException": (InvalidRequestError, 400),
    "ItemsLimitationException": (InvalidRequestError, 400),
    "ItemNameTooLongException": (InvalidRequestError, 400),
    "ColumnValueException": (InvalidRequestError, 400),
    "CorrectedValueException": (InvalidRequestError, 400),
    "INTERNAL_SERVER_ERROR": (InternalServerError, 500),
}

UNKNOWN_ERROR_CODE_STATUS = 400


@dataclass
class Response:
    """Status, parsed JSON body and headers of one API exchange."""

    status: int
    body: Dict[str, Any] = field(default_factory=dict)
    headers: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_httpx(
        cls, resp: httpx.Response, url: Optional[str] = None
    ) -> "Response":
        return cls(
            status=resp.status_code,
            body=_parse_body(resp, url or _request_url(resp)),
            headers=dict(resp.headers),
        )

    @property
    def success(self) -> bool:
        return is_successful_status(self.status) and not self.has_error_keys

    @property
    def has_error_keys(self) -> bool:
        return any(key in self.body for key in ERROR_OBJECT_KEYS)

    @property
    def data(self) -> Optional[Dict[str, Any]]:
        data = self.body.get("data")
        return data if isinstance(data, dict) else None

    @property
    def account_id(self) -> Optional[int]:
        return self.body.get("account_id")

    def dig(self, *keys: Any) -> Any:
        return dig(self.body, *keys)


def _request_url(resp: httpx.Response) -> str:
    # Responses built by hand in a custom Transport carry no request
    try:
        return str(resp.request.url)
    except RuntimeError:
        return "<unknown>"


def _parse_body(resp: httpx.Response, url: str) -> Dict[str, Any]:
    # Empty bodies happen on gateway errors and 403s
    if not resp.content:
        return {}

    ok = is_successful_status(resp.status_code)
    try:
        data = resp.json()
    except ValueError as exc:
        if not ok:
            return {}
        snippet = (resp.text or "")[:500]
        raise MondayParseError(
            f"Expected JSON from {url}, got non-JSON body snippet: "
            f"{snippet!r}"
        ) from exc

    if not isinstance(data, dict):
        if not ok:
            return {}
        raise MondayParseError(
            f"Expected top-level JSON object from {url}, "
            f"got {type(data).__name__}"
        )
    return data


def is_successful_status(status: int) -> bool:
    return 200 <= status <= 299


def status_code_exception(status: int) -> Type[MondayError]:
    return STATUS_CODE_EXCEPTIONS.get(status, MondayError)


def response_error_exception(error_code: str) -> Tuple[Type[MondayError], int]:
    return RESPONSE_ERROR_EXCEPTIONS.get(
        error_code, (MondayError, UNKNOWN_ERROR_CODE_STATUS)
    )


def response_error_code(body: Dict[str, Any]) -> Optional[str]:
    """
    Top-level ``error_code`` first, then the first GraphQL error's
    ``extensions.code`` / ``extensions.error_code``.
    """
    error_code = body.get("error_code")
    if error_code is not None:
        return str(error_code)

    errors = body.get("errors")
    if not isinstance(errors, list) or not errors:
        return None

    code = dig(errors, 0, "extensions", "code")
    if code is None:
        code = dig(errors, 0, "extensions", "error_code")
    return str(code) if code is not None else None


def _status_exception(response: Response) -> MondayError:
    klass = status_code_exception(response.status)
    explicit = response.body.get("error_code")
    if explicit is not None:
        refined, code = response_error_exception(str(explicit))
        if refined is not klass and issubclass(refined, klass):
            return refined(
                str(explicit), response=response, code=code, error_code=str(explicit)
            )
        return klass(response=response, error_code=str(explicit))
    return klass(response=response)


def _body_exception(response: Response) -> MondayError:
    error_code = response_error_code(response.body)
    if error_code is None:
        return MondayError(response=response)

    klass, code = response_error_exception(error_code)
    return klass(error_code, response=response, code=code, error_code=error_code)


def error_for(response: Response) -> MondayError:
    """Build (without raising) the error a failed response maps to."""
    if not is_successful_status(response.status):
        return _status_exception(response)
    return _body_exception(response)


def classify(response: Response) -> Response:
    """Return the response when it succeeded, otherwise raise its typed error."""
    if response.success:
        return response
    raise error_for(response)


__all__ = [
    "ERROR_OBJECT_KEYS",
    "STATUS_CODE_EXCEPTIONS",
    "RESPONSE_ERROR_EXCEPTIONS",
    "Response",
    "classify",
    "error_for",
    "is_successful_status",
    "response_error_code",
    "response_error_exception",
    "status_code_exception",
]
