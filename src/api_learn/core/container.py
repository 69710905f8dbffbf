"""Bootstrap helpers that assemble a fully-wired navigator."""

from __future__ import annotations

from typing import List, Optional, Sequence

import httpx

from api_learn.core.config import AppConfig
from api_learn.core.dependencies import DependencyContainer
from api_learn.core.middleware import CacheInterceptor, LoggingInterceptor
from api_learn.domain.interfaces import IInterceptor
from api_learn.navigation.navigator import Navigator
from api_learn.navigation.paths import AppRoutes
from api_learn.navigation.routes import RouteTable, default_route_table
from api_learn.network.client import ApiClient, build_timeout
from api_learn.services.file_upload_service import FileUploadService
from api_learn.services.post_service import PostApiService
from api_learn.services.user_service import UserApiService


class DIContainer:
    """Factory helpers that wire config, HTTP client, services and routes."""

    @staticmethod
    def create_container(
        *,
        config: Optional[AppConfig] = None,
        http_client: Optional[httpx.Client] = None,
        interceptors: Optional[Sequence[IInterceptor]] = None,
    ) -> DependencyContainer:
        """Container holding the app-wide permanent registrations.

        Route bindings add controllers on top of these while screens are
        on the stack; the permanent ones survive every pop.
        """

        cfg = config or AppConfig.from_env()
        cache = CacheInterceptor(max_age=cfg.cache_max_age) if cfg.enable_cache else None
        client = ApiClient(
            http_client or DIContainer._build_http_client(cfg),
            cfg,
            interceptors=DIContainer._build_interceptors(cfg, interceptors, cache),
        )

        container = DependencyContainer()
        container.put(AppConfig, cfg, permanent=True)
        if cache is not None:
            container.put(CacheInterceptor, cache, permanent=True)
        container.put(ApiClient, client, permanent=True)
        container.put(PostApiService, PostApiService(client), permanent=True)
        container.put(UserApiService, UserApiService(client), permanent=True)
        container.put(FileUploadService, FileUploadService(client), permanent=True)
        return container

    @staticmethod
    def create_navigator(
        *,
        config: Optional[AppConfig] = None,
        http_client: Optional[httpx.Client] = None,
        interceptors: Optional[Sequence[IInterceptor]] = None,
        routes: Optional[RouteTable] = None,
        initial_route: str = AppRoutes.HOME,
    ) -> Navigator:
        container = DIContainer.create_container(
            config=config, http_client=http_client, interceptors=interceptors
        )
        return Navigator(
            routes or default_route_table(),
            container,
            initial_route=initial_route,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _build_http_client(config: AppConfig) -> httpx.Client:
        return httpx.Client(timeout=build_timeout(config))

    @staticmethod
    def _build_interceptors(
        config: AppConfig,
        extra: Optional[Sequence[IInterceptor]],
        cache: Optional[CacheInterceptor] = None,
    ) -> List[IInterceptor]:
        interceptors: List[IInterceptor] = list(extra or [])
        if cache is not None:
            interceptors.append(cache)
        if config.enable_logging:
            interceptors.append(LoggingInterceptor())
        return interceptors
