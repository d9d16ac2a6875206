__all__ = (
    "CacheControlError",
    "ExclusiveDirectiveConflict",
    "InvalidDirectiveValue",
    "InvalidFieldToken",
)


class CacheControlError(Exception): ...


class InvalidDirectiveValue(CacheControlError, ValueError): ...


class InvalidFieldToken(CacheControlError, ValueError): ...


class ExclusiveDirectiveConflict(CacheControlError, ValueError): ...
