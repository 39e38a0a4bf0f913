"""Core surface for monday-client: serializer, request builder, classifier."""

from .config import (
    Configuration,
    configure,
    get_config,
    load_env_config,
    reset_config,
)
from .deprecation import warn_deprecated
from .errors import (
    AuthorizationError,
    ComplexityError,
    InternalServerError,
    InvalidRequestError,
    MondayClientError,
    MondayError,
    MondayParseError,
    MondayTimeoutError,
    MondayTransportError,
    QueryBuildError,
    RateLimitError,
    ResourceNotFoundError,
)
from .graphql import (
    DEFAULT_JSON_FIELDS,
    NULL,
    EnumToken,
    RawJson,
    Variable,
    field_call,
    render_args,
    render_object,
    render_select,
    render_value,
)
from .payload import dig, first_error_message, get_data, get_list
from .request import GraphQLRequest, build_request, mutation, query
from .response import (
    Response,
    classify,
    error_for,
    response_error_code,
    response_error_exception,
    status_code_exception,
)
from .transport import HttpxTransport, Transport

__all__ = [
    # Serializer
    "DEFAULT_JSON_FIELDS",
    "NULL",
    "EnumToken",
    "RawJson",
    "Variable",
    "field_call",
    "render_args",
    "render_object",
    "render_select",
    "render_value",
    # Request builder
    "GraphQLRequest",
    "build_request",
    "query",
    "mutation",
    # Response / classifier
    "Response",
    "classify",
    "error_for",
    "response_error_code",
    "response_error_exception",
    "status_code_exception",
    # Transport
    "Transport",
    "HttpxTransport",
    # Exceptions
    "MondayClientError",
    "MondayError",
    "AuthorizationError",
    "InvalidRequestError",
    "ResourceNotFoundError",
    "RateLimitError",
    "ComplexityError",
    "InternalServerError",
    "MondayTransportError",
    "MondayTimeoutError",
    "MondayParseError",
    "QueryBuildError",
    # Config helpers
    "Configuration",
    "configure",
    "get_config",
    "reset_config",
    "load_env_config",
    # Payload helpers
    "dig",
    "get_data",
    "get_list",
    "first_error_message",
    "warn_deprecated",
]
