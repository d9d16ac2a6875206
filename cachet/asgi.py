from __future__ import annotations

import logging
import typing as t

from cachet._resolver import Descriptor, resolve
from cachet._utils import HEADERS_ENCODING

# Configure logger for this module
logger = logging.getLogger(__name__)


class _ASGIScope(t.TypedDict, total=False):
    """ASGI HTTP scope type."""

    type: str
    asgi: dict[str, str]
    http_version: str
    method: str
    scheme: str
    path: str
    query_string: bytes
    root_path: str
    headers: list[tuple[bytes, bytes]]
    server: tuple[str, int | None] | None
    client: tuple[str, int] | None
    state: dict[str, t.Any]
    extensions: dict[str, t.Any]


_Scope = _ASGIScope
_Message = t.Dict[str, t.Any]
_Receive = t.Callable[[], t.Awaitable[_Message]]
_Send = t.Callable[[_Message], t.Awaitable[None]]
_ASGIApp = t.Callable[[_Scope, _Receive, _Send], t.Awaitable[None]]


class ASGICacheControlMiddleware:
    """
    ASGI middleware that adds a Cache-Control header to HTTP responses.

    The header value is resolved once, from the same descriptors accepted by
    `cachet.resolve`. Responses whose application already set a
    Cache-Control header are passed through unchanged.

    Args:
        app: The ASGI application to wrap.
        *descriptors: Shorthand or mapping descriptors, merged left to right.
        **directives: Keyword directives, merged last.

    Example:
        ```python
        from cachet.asgi import ASGICacheControlMiddleware

        app = ASGICacheControlMiddleware(my_asgi_app, "public", max_age="10m")
        ```
    """

    def __init__(self, app: _ASGIApp, *descriptors: Descriptor, **directives: t.Any) -> None:
        self.app = app
        self.cache_control = resolve(*descriptors, **directives)

        logger.info(
            "Initialized ASGICacheControlMiddleware with cache_control=%s",
            self.cache_control,
        )

    async def __call__(self, scope: _Scope, receive: _Receive, send: _Send) -> None:
        """
        Handle an ASGI request.

        Args:
            scope: The ASGI scope dictionary.
            receive: The ASGI receive callable.
            send: The ASGI send callable.
        """
        if scope["type"] != "http":
            logger.debug("Skipping non-HTTP request: type=%s", scope["type"])
            await self.app(scope, receive, send)
            return

        if self.cache_control is None:
            await self.app(scope, receive, send)
            return

        method = scope.get("method", "UNKNOWN")
        path = scope.get("path", "/")
        header_value = self.cache_control.encode(HEADERS_ENCODING)

        async def inner_send(message: _Message) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))

                if any(key.lower() == b"cache-control" for key, _ in headers):
                    logger.debug(
                        "Application set its own Cache-Control header: method=%s path=%s",
                        method,
                        path,
                    )
                else:
                    headers.append((b"cache-control", header_value))
                    message = {**message, "headers": headers}
                    logger.debug(
                        "Added Cache-Control header: method=%s path=%s status=%d",
                        method,
                        path,
                        message["status"],
                    )
            await send(message)

        try:
            await self.app(scope, receive, inner_send)
        except Exception as e:
            logger.error(
                "Error calling wrapped application: method=%s path=%s error=%s",
                method,
                path,
                str(e),
                exc_info=True,
            )
            raise
