from __future__ import annotations

import mimetypes
import os
from contextlib import ExitStack
from pathlib import Path
from typing import IO, Any, Dict, Mapping, Optional, Protocol, Tuple, Union

import httpx

from .errors import MondayClientError, MondayTimeoutError, MondayTransportError

FileValue = Union[str, "os.PathLike[str]", IO[bytes], Tuple[str, Any]]


class Transport(Protocol):
    """What MondayClient needs from an HTTP stack."""

    def post(
        self,
        url: str,
        body: Dict[str, Any],
        headers: Dict[str, str],
        timeout: httpx.Timeout,
    ) -> httpx.Response: ...

    def post_multipart(
        self,
        url: str,
        query: str,
        files: Mapping[str, FileValue],
        headers: Dict[str, str],
        timeout: httpx.Timeout,
    ) -> httpx.Response: ...

    def close(self) -> None: ...


def build_timeout(open_timeout: float, read_timeout: float) -> httpx.Timeout:
    return httpx.Timeout(
        connect=open_timeout, read=read_timeout, write=read_timeout, pool=open_timeout
    )


class HttpxTransport:
    """
    Transport over a shared httpx.Client.
    - No retries, redirects are not followed
    - httpx timeouts surface as MondayTimeoutError, other httpx failures as
      MondayTransportError
    """

    def __init__(self, http: Optional[httpx.Client] = None):
        self._owns_http = http is None
        self.http = http or httpx.Client(follow_redirects=False)

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def post(
        self,
        url: str,
        body: Dict[str, Any],
        headers: Dict[str, str],
        timeout: httpx.Timeout,
    ) -> httpx.Response:
        try:
            return self.http.post(url, json=body, headers=headers, timeout=timeout)
        except httpx.TimeoutException as exc:
            raise MondayTimeoutError(f"Timed out calling POST {url}: {exc}") from exc
        except httpx.HTTPError as exc:
            raise MondayTransportError(f"HTTPX error calling POST {url}: {exc}") from exc

    def post_multipart(
        self,
        url: str,
        query: str,
        files: Mapping[str, FileValue],
        headers: Dict[str, str],
        timeout: httpx.Timeout,
    ) -> httpx.Response:
        """
        Multipart upload: the operation text goes in the ``query`` part and each
        file in ``variables[<name>]``. Files given as paths are streamed from disk.
        """
        # httpx must set the multipart boundary itself
        headers = {k: v for k, v in headers.items() if k.lower() != "content-type"}

        with ExitStack() as stack:
            parts = {
                f"variables[{name}]": _file_part(value, stack)
                for name, value in files.items()
            }
            try:
                return self.http.post(
                    url,
                    data={"query": query},
                    files=parts,
                    headers=headers,
                    timeout=timeout,
                )
            except httpx.TimeoutException as exc:
                raise MondayTimeoutError(
                    f"Timed out calling POST {url}: {exc}"
                ) from exc
            except httpx.HTTPError as exc:
                raise MondayTransportError(
                    f"HTTPX error calling POST {url}: {exc}"
                ) from exc


def _file_part(value: FileValue, stack: ExitStack) -> Tuple[str, Any, str]:
    if isinstance(value, tuple):
        filename, content = value[0], value[1]
        return filename, content, _guess_type(filename)

    if isinstance(value, (str, os.PathLike)):
        path = Path(value)
        if not path.is_file():
            raise MondayClientError(f"File not found: {path}")
        fh = stack.enter_context(path.open("rb"))
        return path.name, fh, _guess_type(path.name)

    name = getattr(value, "name", None)
    filename = (os.path.basename(name) if isinstance(name, str) else "") or "upload"
    return filename, value, _guess_type(filename)


def _guess_type(filename: str) -> str:
    return mimetypes.guess_type(filename)[0] or "application/octet-stream"


__all__ = ["Transport", "HttpxTransport", "FileValue", "build_timeout"]
