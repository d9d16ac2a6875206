from __future__ import annotations

from unittest import mock

import pytest

from cachet import (
    CACHE_CONTROL,
    InvalidDirectiveValue,
    cache_control,
    cache_control_middleware,
    install_cache_control,
    set_header,
)


def test_install_on_instance(express_response):
    install_cache_control(express_response)

    assert callable(express_response.cache_control)


def test_install_on_class():
    class Response:
        def __init__(self) -> None:
            self.headers: dict[str, str] = {}

    install_cache_control(Response)
    response = Response()

    assert response.cache_control("1m") is response
    assert response.headers == {"Cache-Control": "public, max-age=60"}


def test_install_on_slotted_instance():
    class SlottedResponse:
        __slots__ = ("headers",)

        def __init__(self) -> None:
            self.headers: dict[str, str] = {}

    response = SlottedResponse()
    call_next = mock.Mock()

    cache_control_middleware("1m")(None, response, call_next)

    assert response.headers == {"Cache-Control": "public, max-age=60"}
    assert SlottedResponse.cache_control is cache_control
    call_next.assert_called_once_with()


def test_existing_cache_control_is_kept(express_response):
    def func(*args):
        pass

    express_response.cache_control = func

    assert install_cache_control(express_response) is func
    assert express_response.cache_control is func


def test_install_twice_keeps_first(express_response):
    first = install_cache_control(express_response)

    assert install_cache_control(express_response) is first


def test_custom_implementation(express_response):
    implementation = mock.Mock(return_value="custom")

    install_cache_control(express_response, implementation=implementation)

    assert express_response.cache_control("public") == "custom"
    implementation.assert_called_once_with(express_response, "public")


def test_sets_cache_control_header(express_response):
    install_cache_control(express_response)

    express_response.cache_control("1m")

    express_response.set.assert_called_once_with("Cache-Control", "public, max-age=60")


def test_no_header_without_directives(express_response):
    install_cache_control(express_response)

    express_response.cache_control()
    express_response.cache_control("")
    express_response.cache_control({})
    express_response.cache_control({"private": False, "public": False, "noTransform": False})

    express_response.set.assert_not_called()


def test_header_mapping_response(mapping_response):
    assert cache_control(mapping_response, "private", max_age=30) is mapping_response
    assert mapping_response.headers == {CACHE_CONTROL: "private, max-age=30"}


def test_set_header_prefers_set():
    response = mock.Mock(spec=["set", "headers"])
    response.headers = {}

    set_header(response, "Cache-Control", "no-cache")

    response.set.assert_called_once_with("Cache-Control", "no-cache")
    assert response.headers == {}


def test_chaining(express_response):
    install_cache_control(express_response)

    result = express_response.cache_control("public", {"maxAge": "1m"}).status(200)

    assert result is express_response
    assert express_response.headers == {"Cache-Control": "public, max-age=60"}


def test_error_sets_nothing(express_response):
    install_cache_control(express_response)

    with pytest.raises(InvalidDirectiveValue, match="Invalid value `unknown` for the max-age delta directive"):
        express_response.cache_control("unknown")

    express_response.set.assert_not_called()


def test_install_logs(express_response, caplog: pytest.LogCaptureFixture):
    with caplog.at_level("DEBUG", logger="cachet"):
        install_cache_control(express_response)
        install_cache_control(express_response)

    assert caplog.messages == [
        "Installed cache_control on ExpressResponse instance",
        "Keeping existing cache_control on ExpressResponse",
    ]


class TestMiddleware:
    def test_returns_handler(self):
        assert callable(cache_control_middleware("public"))

    def test_calls_cache_control_then_next(self):
        manager = mock.Mock()
        response = mock.Mock()
        response.cache_control = manager.cache_control
        call_next = manager.call_next
        obj_arg = {"maxAge": "1d"}

        cache_control_middleware("public", obj_arg)(None, response, call_next)

        response.cache_control.assert_called_once_with("public", obj_arg)
        call_next.assert_called_once_with()
        assert manager.mock_calls == [
            mock.call.cache_control("public", obj_arg),
            mock.call.call_next(),
        ]

    def test_sets_header_on_live_response(self, express_response):
        call_next = mock.Mock()

        cache_control_middleware("public", {"maxAge": "1d"})(None, express_response, call_next)

        express_response.set.assert_called_once_with("Cache-Control", "public, max-age=86400")
        call_next.assert_called_once_with()

    def test_calls_next_without_header(self, express_response):
        call_next = mock.Mock()

        cache_control_middleware()(None, express_response, call_next)

        express_response.set.assert_not_called()
        call_next.assert_called_once_with()

    def test_keyword_directives(self, mapping_response):
        call_next = mock.Mock()

        cache_control_middleware(no_store=True)(None, mapping_response, call_next)

        assert mapping_response.headers == {CACHE_CONTROL: "no-cache, no-store"}
        call_next.assert_called_once_with()

    def test_errors_propagate(self, express_response):
        call_next = mock.Mock()
        handler = cache_control_middleware({"maxAge": "unknown"})

        with pytest.raises(InvalidDirectiveValue):
            handler(None, express_response, call_next)

        call_next.assert_not_called()

    def test_request_is_not_inspected(self, express_response):
        request = mock.NonCallableMock(spec=[])

        cache_control_middleware("private")(request, express_response, mock.Mock())

        assert express_response.headers == {"Cache-Control": "private"}
