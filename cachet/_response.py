from __future__ import annotations

import logging
import types
import typing as t

from ._resolver import Descriptor, resolve

logger = logging.getLogger(__name__)

CACHE_CONTROL = "Cache-Control"

R = t.TypeVar("R")

CallNext = t.Callable[[], t.Any]
Handler = t.Callable[[t.Any, t.Any, CallNext], None]

__all__ = (
    "CACHE_CONTROL",
    "cache_control",
    "cache_control_middleware",
    "install_cache_control",
    "set_header",
)


def set_header(response: t.Any, name: str, value: str) -> None:
    """
    Set a header on a response object.

    Uses `response.set(name, value)` when the response provides one and falls
    back to the `response.headers` mapping (Starlette and FastAPI responses).
    """
    setter = getattr(response, "set", None)
    if callable(setter):
        setter(name, value)
    else:
        response.headers[name] = value


def cache_control(self: R, *descriptors: Descriptor, **directives: t.Any) -> R:
    """
    Set the `Cache-Control` header from the given descriptors.

    The header is left untouched when the descriptors produce no directive.
    Returns the response itself so calls can be chained.
    """
    value = resolve(*descriptors, **directives)
    if value:
        set_header(self, CACHE_CONTROL, value)
        logger.debug("Set %s header: %s", CACHE_CONTROL, value)
    return self


def install_cache_control(
    target: t.Any,
    implementation: t.Callable[..., t.Any] | None = None,
) -> t.Callable[..., t.Any]:
    """
    Give a response class or instance a `cache_control` method.

    Nothing happens if `target` already has a `cache_control` attribute, so
    installing twice, or over a custom implementation, keeps what is there.
    A response whose class uses `__slots__` gets the method on its class.

    Args:
        target: A response class, or a single response object.
        implementation: A replacement for the built-in `cache_control`,
            taking the response as its first argument.

    Returns:
        The `cache_control` attribute now present on `target`.
    """
    if hasattr(target, "cache_control"):
        logger.debug("Keeping existing cache_control on %s", type(target).__name__)
        return target.cache_control

    function = implementation if implementation is not None else cache_control

    if isinstance(target, type):
        target.cache_control = function
        logger.debug("Installed cache_control on class %s", target.__name__)
    elif not hasattr(target, "__dict__"):
        # Instances of slotted classes take no new attributes.
        type(target).cache_control = function
        logger.debug("Installed cache_control on class %s", type(target).__name__)
    else:
        target.cache_control = types.MethodType(function, target)
        logger.debug("Installed cache_control on %s instance", type(target).__name__)

    return target.cache_control


def cache_control_middleware(*descriptors: Descriptor, **directives: t.Any) -> Handler:
    """
    Create a `(request, response, call_next)` middleware applying fixed directives.

    Descriptors are validated on each call, so errors surface through the
    pipeline's own error handling.

    Example:
        ```python
        handler = cache_control_middleware("public", {"maxAge": "1d"})
        handler(request, response, call_next)
        ```
    """

    def handler(request: t.Any, response: t.Any, call_next: CallNext) -> None:
        install_cache_control(response)
        response.cache_control(*descriptors, **directives)
        call_next()

    return handler
