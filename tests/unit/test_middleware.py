from typing import List

import httpx

from api_learn.core.middleware import (
    HIDDEN,
    AuthInterceptor,
    CacheInterceptor,
    InterceptorChain,
    LoggingInterceptor,
    mask_headers,
)


class _FakeLogger:
    def __init__(self):
        self.messages: List[str] = []
        self.extras: List[dict] = []

    def _record(self, msg, *_, **kwargs):
        self.messages.append(msg)
        self.extras.append(kwargs.get("extra", {}))

    info = debug = warning = _record


class _RecordingInterceptor:
    def __init__(self, name: str, events: List[str]):
        self.name = name
        self.events = events

    def process_request(self, request):
        self.events.append(f"{self.name}:request")
        return request

    def process_response(self, response):
        self.events.append(f"{self.name}:response")
        return response


def _request(**kwargs) -> httpx.Request:
    return httpx.Request("POST", "https://api.test/posts", **kwargs)


def test_mask_headers_hides_sensitive_values():
    headers = httpx.Headers({"Authorization": "Bearer abc", "Accept": "application/json"})

    masked = mask_headers(headers)

    assert masked["authorization"] == HIDDEN
    assert masked["accept"] == "application/json"


def test_logging_interceptor_logs_request_and_response():
    fake_logger = _FakeLogger()
    interceptor = LoggingInterceptor(logger=fake_logger)  # type: ignore[arg-type]
    request = _request(json={"title": "hi"}, headers={"Cookie": "secret"})

    interceptor.process_request(request)
    interceptor.process_response(
        httpx.Response(201, json={"id": 101}, request=request)
    )

    assert fake_logger.messages == ["api_request", "api_response"]
    request_extra, response_extra = fake_logger.extras
    assert request_extra["method"] == "POST"
    assert request_extra["headers"]["cookie"] == HIDDEN
    assert '"title"' in request_extra["body"]
    assert response_extra["status_code"] == 201
    assert response_extra["body"] == '{"id": 101}'


def test_logging_interceptor_truncates_long_bodies():
    fake_logger = _FakeLogger()
    interceptor = LoggingInterceptor(logger=fake_logger, log_headers=False)  # type: ignore[arg-type]
    request = _request(content=b"x" * 1500)

    interceptor.process_request(request)

    body = fake_logger.extras[0]["body"]
    assert body.endswith("...[truncated]")
    assert "headers" not in fake_logger.extras[0]


def test_auth_interceptor_adds_bearer_token():
    interceptor = AuthInterceptor(lambda: "token-123")

    request = interceptor.process_request(_request())

    assert request.headers["Authorization"] == "Bearer token-123"


def test_auth_interceptor_skips_missing_token():
    interceptor = AuthInterceptor(lambda: None)

    request = interceptor.process_request(_request())

    assert "Authorization" not in request.headers


def test_auth_interceptor_reports_unauthorized():
    failures = []
    interceptor = AuthInterceptor(lambda: None, on_auth_failure=failures.append)
    response = httpx.Response(401, request=_request())

    interceptor.process_response(response)

    assert failures == [response]


def test_chain_runs_requests_forward_and_responses_backward():
    events: List[str] = []
    chain = InterceptorChain(
        [_RecordingInterceptor("a", events), _RecordingInterceptor("b", events)]
    )

    def handler(request):
        events.append("send")
        return httpx.Response(200, request=request)

    chain.execute(_request(), handler)

    assert events == ["a:request", "b:request", "send", "b:response", "a:response"]


def test_chain_add_appends_interceptor():
    chain = InterceptorChain([])
    chain.add(LoggingInterceptor())
    assert len(chain) == 1


class _Clock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def _cached_chain(clock=None):
    cache = CacheInterceptor(max_age=60.0, clock=clock or _Clock(), logger=_FakeLogger())
    sent: List[httpx.Request] = []

    def handler(request):
        sent.append(request)
        return httpx.Response(200, json={"call": len(sent)}, request=request)

    return cache, InterceptorChain([cache]), handler, sent


def _get(url="https://api.test/posts/1") -> httpx.Request:
    return httpx.Request("GET", url)


def test_cache_serves_repeated_get_without_sending():
    cache, chain, handler, sent = _cached_chain()

    first = chain.execute(_get(), handler)
    second = chain.execute(_get(), handler)

    assert len(sent) == 1
    assert second.status_code == 200
    assert second.json() == first.json() == {"call": 1}
    assert len(cache) == 1


def test_cache_entry_expires_after_max_age():
    clock = _Clock()
    _, chain, handler, sent = _cached_chain(clock)
    chain.execute(_get(), handler)

    clock.now = 61.0
    response = chain.execute(_get(), handler)

    assert len(sent) == 2
    assert response.json() == {"call": 2}


def test_cache_ignores_non_get_and_failed_responses():
    cache, chain, _, _ = _cached_chain()

    chain.execute(_request(), lambda request: httpx.Response(201, request=request))
    chain.execute(_get(), lambda request: httpx.Response(404, request=request))

    assert len(cache) == 0


def test_cache_keys_include_query_string():
    _, chain, handler, sent = _cached_chain()

    chain.execute(_get("https://api.test/posts?userId=1"), handler)
    chain.execute(_get("https://api.test/posts?userId=2"), handler)

    assert len(sent) == 2


def test_cache_invalidate_and_clear():
    cache, chain, handler, sent = _cached_chain()
    chain.execute(_get(), handler)
    chain.execute(_get("https://api.test/posts/2"), handler)

    assert cache.invalidate("https://api.test/posts/1") is True
    assert cache.invalidate("https://api.test/posts/1") is False
    chain.execute(_get(), handler)
    assert len(sent) == 3

    cache.clear()
    assert len(cache) == 0
