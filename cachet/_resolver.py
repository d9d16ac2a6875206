from __future__ import annotations

import logging
import typing as t
from collections.abc import Mapping

from ._exceptions import ExclusiveDirectiveConflict, InvalidDirectiveValue
from ._headers import (
    ALIASES,
    BOOLEAN_FIELDS,
    KEYWORDS,
    LIST_FIELDS,
    TIME_FIELDS,
    CacheControl,
    validate_delta_seconds,
    validate_field_value,
)
from ._utils import parse_duration

logger = logging.getLogger(__name__)

Descriptor = t.Union[int, float, str, t.Mapping[str, t.Any], None]

__all__ = ("Descriptor", "resolve", "resolve_directives")


def normalize_descriptor(descriptor: Descriptor) -> dict[str, t.Any]:
    """
    Turn a single descriptor into a partial directive map keyed by field name.

    Numbers and duration strings become `max_age`, keyword strings become
    their boolean flag and mappings keep only the directives they name.
    """
    if descriptor is None or descriptor == "":
        return {}

    if isinstance(descriptor, bool):
        raise TypeError(f"A boolean is not a valid cache control descriptor: {descriptor!r}")

    if isinstance(descriptor, (int, float)):
        return {"max_age": descriptor}

    if isinstance(descriptor, str):
        if descriptor in KEYWORDS:
            return {KEYWORDS[descriptor]: True}

        seconds = parse_duration(descriptor)
        if seconds is None:
            raise InvalidDirectiveValue(f"Invalid value `{descriptor}` for the max-age delta directive.")
        return {"max_age": seconds}

    if isinstance(descriptor, Mapping):
        return {ALIASES[key]: value for key, value in descriptor.items() if key in ALIASES}

    raise TypeError(f"Unsupported cache control descriptor: {descriptor!r}")


def resolve_directives(*descriptors: Descriptor, **directives: t.Any) -> CacheControl | None:
    """
    Merge and validate descriptors into a `CacheControl` model.

    Keyword arguments act as one more mapping, merged after the positional
    descriptors. Returns None when no directive was given at all.
    """
    merged: dict[str, t.Any] = {}
    for descriptor in (*descriptors, directives):
        merged.update(normalize_descriptor(descriptor))

    if not merged:
        return None

    no_cache_disabled = merged.get("no_cache") is False

    for key in LIST_FIELDS:
        if key in merged:
            merged[key] = validate_field_value(key, merged[key])

    for key in BOOLEAN_FIELDS:
        if key in merged:
            merged[key] = bool(merged[key])

    # no-store implies no-cache
    if merged.get("no_store") and not no_cache_disabled:
        merged["no_cache"] = True

    exclusive = [
        merged.get("public", False),
        merged.get("private") is True,
        merged.get("no_cache") is True or merged.get("no_store", False),
    ]
    if sum(1 for flag in exclusive if flag) > 1:
        raise ExclusiveDirectiveConflict(
            "The public, private:true, and no-cache:true/no-store directives are exclusive, "
            "you cannot define more than one of them."
        )

    for key in TIME_FIELDS:
        if merged.get(key) is not None:
            merged[key] = validate_delta_seconds(key, merged[key])
        else:
            merged.pop(key, None)

    if "max_age" in merged and not any(merged.get(key) for key in ("public", "private", "no_cache", "no_store")):
        merged["public"] = True

    return CacheControl(**merged)


def resolve(*descriptors: Descriptor, **directives: t.Any) -> str | None:
    """
    Build a `Cache-Control` header value from one or more descriptors.

    Args:
        *descriptors: Any mix of
            - a number of seconds, e.g. `300`, meaning "public, max-age=300";
            - a duration string, e.g. `"1m"`, handled the same way;
            - one of the keywords `"public"`, `"private"`, `"no-cache"`, `"no-store"`;
            - a mapping of directives, e.g. `{"maxAge": "1d", "noTransform": True}`.
              Unknown keys are ignored.
        **directives: Directives in keyword form, e.g. `max_age=60`, `private=["Set-Cookie"]`.

    Returns:
        The header value, or None when nothing would be emitted.

    Raises:
        InvalidDirectiveValue: A duration or a field directive element is invalid.
        InvalidFieldToken: A `private`/`no-cache` token is malformed.
        ExclusiveDirectiveConflict: More than one of public, private, no-cache/no-store is set.

    Examples:
        >>> resolve(100)
        'public, max-age=100'
        >>> resolve("private", {"maxAge": "1m"})
        'private, max-age=60'
        >>> resolve({"noStore": True})
        'no-cache, no-store'
    """
    cache_control = resolve_directives(*descriptors, **directives)
    header = str(cache_control) if cache_control is not None else ""

    if not header:
        logger.debug("No Cache-Control directives resolved")
        return None

    logger.debug("Resolved Cache-Control header: %s", header)
    return header
