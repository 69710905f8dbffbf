"""Controller for the GET request screen."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from api_learn.core.config import AppConfig
from api_learn.domain.models import Post
from api_learn.services.post_service import PostApiService

from .base import Controller

if TYPE_CHECKING:  # pragma: no cover
    from api_learn.core.dependencies import DependencyContainer

FETCH_POSTS_FAILED = "Failed to fetch posts"


class GetRequestController(Controller):
    """Fetch all posts, a single post, posts by user and paginated posts."""

    items_per_page = 10

    def __init__(self, post_service: PostApiService, *, auto_load: bool = False) -> None:
        super().__init__()
        self._post_service = post_service
        self._auto_load = auto_load
        self.posts: List[Post] = []
        self.is_loading = False
        self.error_message: Optional[str] = None
        self.selected_post: Optional[Post] = None
        self.filter_by_user_id: Optional[int] = None
        self.current_page = 1
        self.has_more = True

    @classmethod
    def _build(cls, container: "DependencyContainer") -> "GetRequestController":
        return cls(
            container.find(PostApiService),
            auto_load=container.find(AppConfig).auto_load_on_init,
        )

    def on_init(self) -> None:
        super().on_init()
        if self._auto_load:
            self.fetch_all_posts()

    def fetch_all_posts(self) -> None:
        self._start()
        self.filter_by_user_id = None
        response = self._post_service.get_all_posts()
        self.is_loading = False
        if response.is_success and response.has_data:
            self.posts = list(response.data)
        else:
            self.error_message = response.error.message if response.error else FETCH_POSTS_FAILED

    def fetch_post_by_id(self, post_id: int) -> None:
        self._start()
        response = self._post_service.get_post_by_id(post_id)
        self.is_loading = False
        if response.is_success and response.has_data:
            self.selected_post = response.data
        else:
            self.error_message = response.error.message if response.error else "Failed to fetch post"

    def fetch_posts_by_user(self, user_id: int) -> None:
        self._start()
        self.filter_by_user_id = user_id
        response = self._post_service.get_posts_by_user(user_id)
        self.is_loading = False
        if response.is_success and response.has_data:
            self.posts = list(response.data)
        else:
            self.error_message = response.error.message if response.error else FETCH_POSTS_FAILED

    def fetch_posts_paginated(self, *, load_more: bool = False) -> None:
        if load_more and not self.has_more:
            return
        if load_more:
            self.current_page += 1
        else:
            self.current_page = 1
            self.posts = []

        self._start()
        response = self._post_service.get_posts_paginated(
            page=self.current_page, limit=self.items_per_page
        )
        self.is_loading = False
        if response.is_success and response.has_data:
            if load_more:
                self.posts.extend(response.data)
            else:
                self.posts = list(response.data)
            self.has_more = bool(response.pagination and response.pagination.has_next_page)
        else:
            if load_more:
                self.current_page -= 1
            self.error_message = response.error.message if response.error else FETCH_POSTS_FAILED

    def refresh_posts(self) -> None:
        self.current_page = 1
        self.has_more = True
        self.fetch_all_posts()

    def _start(self) -> None:
        self.is_loading = True
        self.error_message = None
