from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from .core.config import Configuration, get_config, load_env_config
from .core.errors import MondayClientError
from .core.observability import track_api_call
from .core.registry import ResourceNamespace, bind_resources
from .core.request import GraphQLRequest
from .core.response import Response, classify
from .core.transport import FileValue, HttpxTransport, Transport, build_timeout

T = TypeVar("T", bound=BaseModel)

Query = Union[GraphQLRequest, str]


class MondayModelValidationError(MondayClientError):
    pass


class MondayClient:
    """
    Synchronous client for the monday.com GraphQL API.
    - Builds headers from its Configuration (token, API version, timeouts)
    - Sends one POST per call through a Transport, no retries
    - Returns a Response on success, raises a MondayError subclass otherwise
    - Resource wrappers are bound as attributes: client.board.create(...)
    """

    def __init__(
        self,
        *,
        transport: Optional[Transport] = None,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.Client] = None,
        **config_args: Any,
    ):
        # No settings: share the process-wide object so later configure() calls apply.
        self.config: Configuration = (
            get_config().merged(**config_args) if config_args else get_config()
        )
        self.log = logger or logging.getLogger("monday_client.client")

        self._owns_transport = transport is None
        self.transport: Transport = transport or HttpxTransport(http)

        self._resources: Dict[str, ResourceNamespace] = bind_resources(self)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "MondayClient":
        settings = load_env_config()
        if not settings.get("token") and "token" not in kwargs:
            raise ValueError("Missing MONDAY_TOKEN in environment.")
        return cls(**{**settings, **kwargs})

    def __getattr__(self, name: str) -> ResourceNamespace:
        resources = self.__dict__.get("_resources", {})
        if name in resources:
            return resources[name]
        raise AttributeError(f"{type(self).__name__!s} has no attribute {name!r}")

    @property
    def resources(self) -> Dict[str, ResourceNamespace]:
        return dict(self._resources)

    def close(self) -> None:
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> "MondayClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # --- Requests ---------------------------------------------------------- #

    def make_request(self, query: Query) -> Response:
        """
        Post a GraphQL operation as {"query": text}.
        - Raises MondayTimeoutError / MondayTransportError on HTTP-level faults
        - Raises MondayParseError if a 2xx body isn't a JSON object
        - Raises a MondayError subclass on failures (including 200-with-errors)
        """
        return self._send(
            query,
            lambda text: self.transport.post(
                self.config.host, {"query": text}, self.request_headers(), self.timeout
            ),
            endpoint=self.config.host,
        )

    def make_file_request(
        self, query: Query, files: Mapping[str, FileValue]
    ) -> Response:
        """
        Upload files with a multipart request to the files endpoint.
        ``files`` keys match the ``$name`` variables used in the query.
        Retries are never applied to avoid duplicate uploads.
        """
        return self._send(
            query,
            lambda text: self.transport.post_multipart(
                self.config.files_host,
                text,
                files,
                self.request_multipart_headers(),
                self.timeout,
            ),
            endpoint=self.config.files_host,
        )

    def request_model(self, model: Type[T], query: Query, *path: Any) -> T:
        """Make the request and validate the value at ``path`` in the body."""
        response = self.make_request(query)
        payload = response.dig(*path) if path else response.body
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise MondayModelValidationError(
                f"Response did not match model {model.__name__}: {exc}"
            ) from exc

    def _send(self, query: Query, post, *, endpoint: str) -> Response:
        operation = query.field if isinstance(query, GraphQLRequest) else None

        with track_api_call(self.log, endpoint, operation) as call:
            response = Response.from_httpx(post(str(query)), endpoint)
            call.status = response.status
            call.ok = response.success
            call.complexity = response.dig("data", "complexity", "query")

        return classify(response)

    # --- Headers / timeouts ------------------------------------------------ #

    @property
    def timeout(self) -> httpx.Timeout:
        return build_timeout(self.config.open_timeout, self.config.read_timeout)

    def _auth_headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        if self.config.token:
            headers["Authorization"] = self.config.token
        if self.config.version:
            headers["API-Version"] = self.config.version
        return headers

    def request_headers(self) -> Dict[str, str]:
        return {"Content-Type": "application/json", **self._auth_headers()}

    def request_multipart_headers(self) -> Dict[str, str]:
        return self._auth_headers()


__all__ = ["MondayClient", "MondayModelValidationError"]
