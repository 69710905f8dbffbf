"""Controller for the POST request screen."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional

from api_learn.domain.models import Post
from api_learn.services.post_service import PostApiService
from api_learn.utils.validators import (
    MIN_TITLE_LENGTH,
    collect_errors,
    validate_body,
    validate_title,
    validate_user_id,
)

from .base import Controller

if TYPE_CHECKING:  # pragma: no cover
    from api_learn.core.dependencies import DependencyContainer

DEFAULT_USER_ID = "1"


class PostRequestController(Controller):
    """Holds the create-post form and the posts created during this screen."""

    def __init__(self, post_service: PostApiService) -> None:
        super().__init__()
        self._post_service = post_service
        self.title = ""
        self.body = ""
        self.user_id = DEFAULT_USER_ID
        self.is_loading = False
        self.success_message: Optional[str] = None
        self.error_message: Optional[str] = None
        self.field_errors: Dict[str, str] = {}
        self.created_posts: List[Post] = []

    @classmethod
    def _build(cls, container: "DependencyContainer") -> "PostRequestController":
        return cls(container.find(PostApiService))

    def validate_form(self) -> bool:
        self.field_errors = collect_errors(
            title=validate_title(self.title, min_length=MIN_TITLE_LENGTH),
            body=validate_body(self.body),
            user_id=validate_user_id(self.user_id),
        )
        return not self.field_errors

    def create_post(self) -> Optional[Post]:
        if not self.validate_form():
            return None

        self.is_loading = True
        self.success_message = None
        self.error_message = None
        response = self._post_service.create_post(
            title=self.title.strip(),
            body=self.body.strip(),
            user_id=int(self.user_id.strip()),
        )
        self.is_loading = False

        if response.is_success and response.has_data:
            post = response.data
            self.success_message = f"Post created successfully! ID: {post.id}"
            self.created_posts.insert(0, post)
            self.title = ""
            self.body = ""
            return post

        self.error_message = (
            response.error.message
            if response.error
            else response.message or "Failed to create post"
        )
        return None

    def clear_form(self) -> None:
        self.title = ""
        self.body = ""
        self.user_id = DEFAULT_USER_ID
        self.field_errors = {}
        self.success_message = None
        self.error_message = None

    def on_close(self) -> None:
        self.clear_form()
        super().on_close()
