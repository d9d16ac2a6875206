from __future__ import annotations

from typing import Any
from unittest import mock

import pytest


class ExpressResponse:
    """A response exposing `set(name, value)`, the way express responses do."""

    def __init__(self) -> None:
        self.headers: dict[str, str] = {}
        self.status_code = 200
        self.set = mock.Mock(side_effect=self.headers.__setitem__)

    def status(self, status_code: int) -> "ExpressResponse":
        self.status_code = status_code
        return self


class MappingResponse:
    """A response exposing only a `headers` mapping, like Starlette responses."""

    def __init__(self) -> None:
        self.headers: dict[str, Any] = {}


@pytest.fixture()
def express_response() -> ExpressResponse:
    return ExpressResponse()


@pytest.fixture()
def mapping_response() -> MappingResponse:
    return MappingResponse()
