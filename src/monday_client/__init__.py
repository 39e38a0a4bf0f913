"""monday_client package exports."""

from .client import MondayClient, MondayModelValidationError
from .core.config import Configuration, configure, get_config, reset_config
from .core.errors import (
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
from .core.graphql import NULL, EnumToken, RawJson, Variable
from .core.logging import setup_logging
from .core.request import GraphQLRequest, build_request
from .core.response import Response
from .models import GraphQLErrorEntry, ItemsPage

__version__ = "1.0.0"

__all__ = [
    # Client
    "MondayClient",
    "Response",
    "GraphQLRequest",
    "build_request",
    # Config
    "Configuration",
    "configure",
    "get_config",
    "reset_config",
    # Argument values
    "NULL",
    "EnumToken",
    "RawJson",
    "Variable",
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
    "MondayModelValidationError",
    "QueryBuildError",
    # Models
    "GraphQLErrorEntry",
    "ItemsPage",
    # Logging
    "setup_logging",
]
