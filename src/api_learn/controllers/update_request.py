"""Controller for the UPDATE (PUT / PATCH) request screen."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional

from api_learn.core.config import AppConfig
from api_learn.domain.models import ApiResponse, Post
from api_learn.services.post_service import PostApiService
from api_learn.utils.validators import collect_errors, validate_title

from .base import Controller

if TYPE_CHECKING:  # pragma: no cover
    from api_learn.core.dependencies import DependencyContainer

VISIBLE_POSTS = 10


class UpdateRequestController(Controller):
    """Edit a selected post and send it back with PATCH or PUT."""

    def __init__(self, post_service: PostApiService, *, auto_load: bool = False) -> None:
        super().__init__()
        self._post_service = post_service
        self._auto_load = auto_load
        self.posts: List[Post] = []
        self.is_loading = False
        self.is_updating = False
        self.selected_post: Optional[Post] = None
        self.title = ""
        self.body = ""
        self.use_patch = True
        self.field_errors: Dict[str, str] = {}
        self.success_message: Optional[str] = None
        self.error_message: Optional[str] = None

    @classmethod
    def _build(cls, container: "DependencyContainer") -> "UpdateRequestController":
        return cls(
            container.find(PostApiService),
            auto_load=container.find(AppConfig).auto_load_on_init,
        )

    @property
    def method_name(self) -> str:
        return "PATCH" if self.use_patch else "PUT"

    def on_init(self) -> None:
        super().on_init()
        if self._auto_load:
            self.fetch_posts()

    def fetch_posts(self) -> None:
        self.is_loading = True
        self.error_message = None
        response = self._post_service.get_all_posts()
        self.is_loading = False
        if response.is_success and response.has_data:
            self.posts = list(response.data)[:VISIBLE_POSTS]
        else:
            self.error_message = (
                response.error.message if response.error else "Failed to fetch posts"
            )

    def select_post(self, post: Post) -> None:
        self.selected_post = post
        self.title = post.title
        self.body = post.body
        self.field_errors = {}
        self.success_message = None
        self.error_message = None

    def toggle_method(self, patch: bool) -> None:
        self.use_patch = patch

    def validate_form(self) -> bool:
        body_error = None if self.body.strip() else "Body is required"
        self.field_errors = collect_errors(title=validate_title(self.title), body=body_error)
        return not self.field_errors

    def update_post(self) -> Optional[Post]:
        selected = self.selected_post
        if selected is None or not self.validate_form():
            return None

        self.is_updating = True
        self.success_message = None
        self.error_message = None
        title = self.title.strip()
        body = self.body.strip()

        response: ApiResponse[Post]
        if self.use_patch:
            response = self._post_service.patch_post(
                selected.id,
                title=title if title != selected.title else None,
                body=body if body != selected.body else None,
            )
        else:
            response = self._post_service.update_post(
                selected.copy_with(title=title, body=body)
            )
        self.is_updating = False

        if response.is_success and response.has_data:
            updated = response.data
            self.success_message = f"Post updated successfully using {self.method_name}!"
            for index, post in enumerate(self.posts):
                if post.id == selected.id:
                    self.posts[index] = updated
                    break
            self.selected_post = updated
            return updated

        self.error_message = (
            response.error.message if response.error else "Failed to update post"
        )
        return None
