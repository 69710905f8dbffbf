import httpx

from api_learn.core.config import AppConfig, Environment
from api_learn.core.container import DIContainer
from api_learn.core.dependencies import DependencyState
from api_learn.core.middleware import CacheInterceptor, LoggingInterceptor
from api_learn.navigation.navigator import Navigator
from api_learn.navigation.paths import AppRoutes
from api_learn.network.client import ApiClient
from api_learn.services.file_upload_service import FileUploadService
from api_learn.services.post_service import PostApiService
from api_learn.services.user_service import UserApiService


def _http_client() -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200, json=[])))


def test_create_container_registers_permanent_services():
    config = AppConfig(enable_logging=False)

    container = DIContainer.create_container(config=config, http_client=_http_client())

    assert container.find(AppConfig) is config
    client = container.find(ApiClient)
    for service_type in (PostApiService, UserApiService, FileUploadService):
        service = container.find(service_type)
        assert service.client is client
        assert container.delete(service_type) is False
        assert container.state(service_type) is DependencyState.CONSTRUCTED


def test_logging_interceptor_follows_config():
    quiet = DIContainer.create_container(
        config=AppConfig(environment=Environment.PRODUCTION), http_client=_http_client()
    )
    verbose = DIContainer.create_container(
        config=AppConfig(environment=Environment.DEVELOPMENT), http_client=_http_client()
    )

    assert len(quiet.find(ApiClient).interceptors) == 0
    assert len(verbose.find(ApiClient).interceptors) == 1


def test_extra_interceptors_run_before_logging():
    class _Marker:
        def process_request(self, request):
            return request

        def process_response(self, response):
            return response

    marker = _Marker()
    container = DIContainer.create_container(
        config=AppConfig(), http_client=_http_client(), interceptors=[marker]
    )

    chain = container.find(ApiClient).interceptors
    assert chain._interceptors[0] is marker  # type: ignore[attr-defined]
    assert isinstance(chain._interceptors[1], LoggingInterceptor)  # type: ignore[attr-defined]


def test_create_navigator_opens_initial_route():
    navigator = DIContainer.create_navigator(
        config=AppConfig(enable_logging=False),
        http_client=_http_client(),
        initial_route=AppRoutes.BEST_PRACTICES,
    )

    assert isinstance(navigator, Navigator)
    assert navigator.stack == [AppRoutes.BEST_PRACTICES]


def test_create_container_reads_env_when_no_config(monkeypatch):
    monkeypatch.setenv("API_LEARN_MAX_RETRIES", "7")

    container = DIContainer.create_container(http_client=_http_client())

    assert container.find(AppConfig).max_retries == 7


def test_response_cache_is_opt_in():
    plain = DIContainer.create_container(
        config=AppConfig(enable_logging=False), http_client=_http_client()
    )
    cached = DIContainer.create_container(
        config=AppConfig(enable_logging=False, enable_cache=True, cache_max_age=30.0),
        http_client=_http_client(),
    )

    assert CacheInterceptor not in plain
    cache = cached.find(CacheInterceptor)
    chain = cached.find(ApiClient).interceptors
    assert chain._interceptors == [cache]  # type: ignore[attr-defined]
    assert cached.delete(CacheInterceptor) is False
