from cachet._exceptions import (
    CacheControlError as CacheControlError,
    ExclusiveDirectiveConflict as ExclusiveDirectiveConflict,
    InvalidDirectiveValue as InvalidDirectiveValue,
    InvalidFieldToken as InvalidFieldToken,
)
from cachet._headers import CacheControl as CacheControl
from cachet._resolver import (
    Descriptor as Descriptor,
    resolve as resolve,
    resolve_directives as resolve_directives,
)
from cachet._response import (
    CACHE_CONTROL as CACHE_CONTROL,
    cache_control as cache_control,
    cache_control_middleware as cache_control_middleware,
    install_cache_control as install_cache_control,
    set_header as set_header,
)
from cachet._utils import parse_duration as parse_duration

__version__ = "0.1.0"

__all__ = (
    ## Resolution
    "Descriptor",
    "resolve",
    "resolve_directives",
    "parse_duration",
    ## Models
    "CacheControl",
    ## Responses
    "CACHE_CONTROL",
    "cache_control",
    "cache_control_middleware",
    "install_cache_control",
    "set_header",
    ## Errors
    "CacheControlError",
    "ExclusiveDirectiveConflict",
    "InvalidDirectiveValue",
    "InvalidFieldToken",
)
