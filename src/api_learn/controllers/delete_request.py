"""Controller for the DELETE request screen."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Set

from api_learn.core.config import AppConfig
from api_learn.domain.models import Post
from api_learn.services.post_service import PostApiService

from .base import Controller

if TYPE_CHECKING:  # pragma: no cover
    from api_learn.core.dependencies import DependencyContainer

VISIBLE_POSTS = 10


class DeleteRequestController(Controller):
    """Pessimistic and optimistic deletes with an undo list."""

    def __init__(self, post_service: PostApiService, *, auto_load: bool = False) -> None:
        super().__init__()
        self._post_service = post_service
        self._auto_load = auto_load
        self.posts: List[Post] = []
        self.is_loading = False
        self.error_message: Optional[str] = None
        self.notice: Optional[str] = None
        self.deleting_ids: Set[int] = set()
        self.recently_deleted: List[Post] = []

    @classmethod
    def _build(cls, container: "DependencyContainer") -> "DeleteRequestController":
        return cls(
            container.find(PostApiService),
            auto_load=container.find(AppConfig).auto_load_on_init,
        )

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

    def delete_post(self, post: Post) -> bool:
        """Wait for the server before removing the post locally."""

        self.deleting_ids.add(post.id)
        response = self._post_service.delete_post(post.id)
        self.deleting_ids.discard(post.id)
        if response.is_success:
            self.posts = [item for item in self.posts if item.id != post.id]
            self.recently_deleted.append(post)
            self.notice = f"Post deleted: {post.title}"
            return True
        self.error_message = (
            response.error.message if response.error else "Failed to delete post"
        )
        return False

    def delete_post_optimistic(self, post: Post) -> bool:
        """Remove the post immediately and put it back if the server refuses."""

        try:
            index = self.posts.index(post)
        except ValueError:
            index = len(self.posts)
        else:
            self.posts.pop(index)

        response = self._post_service.delete_post(post.id)
        if not response.is_success:
            self.posts.insert(index, post)
            self.error_message = "Failed to delete. Changes reverted."
            return False
        self.recently_deleted.append(post)
        self.notice = f"Post deleted: {post.title}"
        return True

    def undo_delete(self, post: Post) -> None:
        """Restore a deleted post locally; the server copy stays deleted."""

        if post in self.recently_deleted:
            self.recently_deleted.remove(post)
        self.posts.insert(0, post)
        self.notice = "Post restored"
