from __future__ import annotations

import typing as t

from cachet._resolver import Descriptor, resolve
from cachet._response import CACHE_CONTROL

try:
    import fastapi
except ImportError as e:
    raise ImportError(
        "fastapi is required to use cachet.fastapi module. "
        "Please install cachet with the 'fastapi' extra, "
        "e.g., 'pip install cachet[fastapi]'."
    ) from e


def cache(*descriptors: Descriptor, **directives: t.Any) -> t.Any:
    """
    Add an HTTP Cache-Control header to FastAPI responses.

    Accepts the same descriptors as `cachet.resolve`: a number of seconds, a
    duration string, one of the keywords "public", "private", "no-cache" and
    "no-store", a mapping of directives, or directives as keyword arguments.

    The header value is resolved once, when the route is declared, so an
    invalid combination fails at import time rather than on the first request.

    Args:
        *descriptors: Shorthand or mapping descriptors, merged left to right.
        **directives: Keyword directives, merged last.
            public: Any cache may store the response. [RFC 9111, Section 5.2.2.9]
            private: Only private caches may store the response, or, given a
                list of field names, only those header fields are private.
                [RFC 9111, Section 5.2.2.7]
            no_cache: Stored responses must be revalidated before use, or,
                given a list of field names, only those fields.
                [RFC 9111, Section 5.2.2.4]
            no_store: No cache may store the response. Implies no_cache
                unless no_cache=False is given. [RFC 9111, Section 5.2.2.5]
            no_transform: Intermediaries must not transform the content.
                [RFC 9111, Section 5.2.2.6]
            must_revalidate: Stale responses must be revalidated.
                [RFC 9111, Section 5.2.2.2]
            proxy_revalidate: Like must_revalidate, for shared caches only.
                [RFC 9111, Section 5.2.2.8]
            max_age: Freshness lifetime in seconds or as a duration string.
                Defaults public to True when no other scope is given.
                [RFC 9111, Section 5.2.2.1]
            s_maxage: Freshness lifetime for shared caches. Dropped when the
                response is private, no-cache or no-store.
                [RFC 9111, Section 5.2.2.10]

    Returns:
        A dependency that adds the Cache-Control header to the response.

    Examples:
        >>> from fastapi import FastAPI
        >>> from cachet.fastapi import cache
        >>>
        >>> app = FastAPI()
        >>>
        >>> # "public, max-age=300"
        >>> @app.get("/api/items", dependencies=[cache("5m")])
        >>> async def list_items():
        ...     return []
        >>>
        >>> # 'private="Set-Cookie", max-age=600'
        >>> @app.get("/api/user/data")
        >>> async def get_user_data(
        ...     _: None = cache(max_age=600, private=["Set-Cookie"])
        ... ):
        ...     return {"data": "user_specific"}
        >>>
        >>> # "no-cache, no-store"
        >>> @app.get("/api/secrets", dependencies=[cache("no-store")])
        >>> async def get_secrets():
        ...     return {"secret": "value"}
    """
    value = resolve(*descriptors, **directives)

    def add_cache_headers(response: fastapi.Response) -> t.Any:
        """Add the Cache-Control header to the response."""
        if value is not None:
            response.headers[CACHE_CONTROL] = value

    return fastapi.Depends(add_cache_headers)
