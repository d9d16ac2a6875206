import string
from typing import Any, List, Optional, Union

from ._exceptions import InvalidDirectiveValue, InvalidFieldToken
from ._utils import parse_duration

## Grammar

# token = 1*(ALPHA / DIGIT / "-" / "_")
tchar = string.ascii_letters + string.digits + "-_"

TIME_FIELDS = [
    "max_age",
    "s_maxage",
]

BOOLEAN_FIELDS = [
    "public",
    "no_store",
    "no_transform",
    "must_revalidate",
    "proxy_revalidate",
]

LIST_FIELDS = [
    "private",
    "no_cache",
]

# Mapping keys accepted in a directive map, resolved to their field name.
ALIASES = {
    "public": "public",
    "private": "private",
    "noCache": "no_cache",
    "no_cache": "no_cache",
    "noStore": "no_store",
    "no_store": "no_store",
    "noTransform": "no_transform",
    "no_transform": "no_transform",
    "mustRevalidate": "must_revalidate",
    "must_revalidate": "must_revalidate",
    "proxyRevalidate": "proxy_revalidate",
    "proxy_revalidate": "proxy_revalidate",
    "maxAge": "max_age",
    "max_age": "max_age",
    "sMaxage": "s_maxage",
    "sMaxAge": "s_maxage",
    "s_maxage": "s_maxage",
}

# Bare string shorthands.
KEYWORDS = {
    "public": "public",
    "private": "private",
    "no-cache": "no_cache",
    "no-store": "no_store",
}

__all__ = (
    "CacheControl",
)


def denormalize_directive(field: str) -> str:
    return field.replace("_", "-")


def is_token(text: str) -> bool:
    return bool(text) and all(char in tchar for char in text)


def validate_field_value(field: str, value: Any) -> Union[bool, List[str]]:
    """
    Validate the value of a field directive (`private` or `no-cache`).

    Booleans (and None) switch the whole directive on or off, a single token
    or a list of tokens restricts it to the named header fields.
    """
    directive = denormalize_directive(field)

    if value is None or isinstance(value, bool):
        return bool(value)

    if isinstance(value, str):
        if not value:
            return False
        if not is_token(value):
            raise InvalidFieldToken(f'Invalid token "{value}" for the {directive} field directive.')
        return [value]

    if isinstance(value, (list, tuple)):
        for item in value:
            if not isinstance(item, str) or not is_token(item):
                raise InvalidDirectiveValue(f"Invalid value `{item}` for the {directive} field directive.")
        return list(value) or False

    raise InvalidDirectiveValue(f"Invalid value `{value}` for the {directive} field directive.")


def validate_delta_seconds(field: str, value: Any) -> int:
    directive = denormalize_directive(field)
    seconds: Optional[int]

    if isinstance(value, bool):
        seconds = None
    elif isinstance(value, int):
        seconds = value
    elif isinstance(value, float):
        seconds = int(value) if value.is_integer() else None
    elif isinstance(value, str):
        seconds = parse_duration(value)
    else:
        seconds = None

    if seconds is None or seconds < 0:
        raise InvalidDirectiveValue(f"Invalid value `{value}` for the {directive} delta directive.")
    return seconds


class CacheControl:

    def __init__(self,
                 public: bool = False,  # [RFC9111, Section 5.2.2.9]
                 private: Union[bool, List[str]] = False,  # [RFC9111, Section 5.2.2.7]
                 no_cache: Union[bool, List[str]] = False,  # [RFC9111, Section 5.2.2.4]
                 no_store: bool = False,  # [RFC9111, Section 5.2.2.5]
                 no_transform: bool = False,  # [RFC9111, Section 5.2.2.6]
                 must_revalidate: bool = False,  # [RFC9111, Section 5.2.2.2]
                 proxy_revalidate: bool = False,  # [RFC9111, Section 5.2.2.8]
                 max_age: Optional[int] = None,  # [RFC9111, Section 5.2.2.1]
                 s_maxage: Optional[int] = None,  # [RFC9111, Section 5.2.2.10]
                 ) -> None:
        self.public = public
        self.private = private
        self.no_cache = no_cache
        self.no_store = no_store
        self.no_transform = no_transform
        self.must_revalidate = must_revalidate
        self.proxy_revalidate = proxy_revalidate
        self.max_age = max_age
        self.s_maxage = s_maxage

    @property
    def is_shared_cacheable(self) -> bool:
        return not (self.private or self.no_cache or self.no_store)

    def directives(self) -> List[str]:
        directives: List[str] = []

        if self.public:
            directives.append("public")

        for field in LIST_FIELDS:
            value = getattr(self, field)
            directive = denormalize_directive(field)
            if value is True:
                directives.append(directive)
            elif isinstance(value, list) and value:
                field_names = ", ".join(value)
                directives.append(f'{directive}="{field_names}"')

        for field in ("no_store", "no_transform", "must_revalidate", "proxy_revalidate"):
            if getattr(self, field):
                directives.append(denormalize_directive(field))

        if self.max_age is not None:
            directives.append(f"max-age={self.max_age}")

        # Shared caches must not see s-maxage on responses they may not store.
        if self.s_maxage is not None and self.is_shared_cacheable:
            directives.append(f"s-maxage={self.s_maxage}")

        return directives

    def __str__(self) -> str:
        return ", ".join(self.directives())

    def __repr__(self) -> str:
        fields = ""

        for key in BOOLEAN_FIELDS + LIST_FIELDS:
            value = getattr(self, key)
            if value is True:
                fields += f"{key}, "
            elif value:
                fields += f"{key}={value}, "

        for key in TIME_FIELDS:
            value = getattr(self, key)
            if value is not None:
                fields += f"{key}={value}, "

        fields = fields[:-2]

        return f"<{type(self).__name__} {fields}>"
