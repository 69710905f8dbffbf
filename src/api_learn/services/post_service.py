"""Post CRUD operations against the ``/posts`` resource."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from api_learn.core.config import POSTS_ENDPOINT, post_endpoint
from api_learn.domain.models import ApiResponse, PaginationInfo, Post, parse_posts

from .base import BaseApiService


class PostApiService(BaseApiService):
    """GET, POST, PUT, PATCH and DELETE on posts."""

    def get_all_posts(self) -> ApiResponse[List[Post]]:
        def action() -> ApiResponse[List[Post]]:
            response = self._client.get(POSTS_ENDPOINT)
            if response.status_code != 200:
                return self._unexpected_status(response, "Failed to fetch posts")
            posts = parse_posts(response.json())
            return ApiResponse.success_with(
                posts,
                message=f"Successfully fetched {len(posts)} posts",
                status_code=response.status_code,
            )

        return self._execute("get_all_posts", action)

    def get_post_by_id(self, post_id: int) -> ApiResponse[Post]:
        def action() -> ApiResponse[Post]:
            response = self._client.get(post_endpoint(post_id))
            if response.status_code == 404:
                return ApiResponse.failure(
                    f"Post with ID {post_id} not found",
                    status_code=404,
                    error_type="NotFoundError",
                )
            if response.status_code != 200:
                return self._unexpected_status(
                    response, f"Failed to fetch post #{post_id}"
                )
            post = Post.model_validate(response.json())
            return ApiResponse.success_with(
                post,
                message=f"Successfully fetched post #{post_id}",
                status_code=response.status_code,
            )

        return self._execute("get_post_by_id", action)

    def get_posts_by_user(self, user_id: int) -> ApiResponse[List[Post]]:
        def action() -> ApiResponse[List[Post]]:
            response = self._client.get(POSTS_ENDPOINT, params={"userId": user_id})
            if response.status_code != 200:
                return self._unexpected_status(
                    response, f"Failed to fetch posts for user #{user_id}"
                )
            posts = parse_posts(response.json())
            return ApiResponse.success_with(
                posts,
                message=f"Found {len(posts)} posts for user #{user_id}",
                status_code=response.status_code,
            )

        return self._execute("get_posts_by_user", action)

    def get_posts_paginated(self, *, page: int = 1, limit: int = 10) -> ApiResponse[List[Post]]:
        if page < 1 or limit < 1:
            return ApiResponse.failure(
                "page and limit must be positive",
                status_code=400,
                error_type="ValidationFailedError",
            )

        def action() -> ApiResponse[List[Post]]:
            response = self._client.get(
                POSTS_ENDPOINT, params={"_page": page, "_limit": limit}
            )
            if response.status_code != 200:
                return self._unexpected_status(response, "Failed to fetch posts")
            posts = parse_posts(response.json())
            try:
                total = int(response.headers.get("x-total-count", "0"))
            except ValueError:
                total = 0
            return ApiResponse.success_with(
                posts,
                message=f"Fetched page {page} with {len(posts)} posts",
                status_code=response.status_code,
                pagination=PaginationInfo.from_totals(page=page, limit=limit, total=total),
            )

        return self._execute("get_posts_paginated", action)

    def create_post(self, *, title: str, body: str, user_id: int) -> ApiResponse[Post]:
        def action() -> ApiResponse[Post]:
            response = self._client.post(
                POSTS_ENDPOINT,
                json={"title": title, "body": body, "userId": user_id},
            )
            if response.status_code not in (200, 201):
                return self._unexpected_status(response, "Failed to create post")
            post = Post.model_validate(response.json())
            return ApiResponse.success_with(
                post,
                message="Post created successfully",
                status_code=response.status_code,
            )

        return self._execute("create_post", action)

    def update_post(self, post: Post) -> ApiResponse[Post]:
        """Replace the whole post with PUT."""

        def action() -> ApiResponse[Post]:
            response = self._client.put(post_endpoint(post.id), json=post.to_json())
            if response.status_code != 200:
                return self._unexpected_status(
                    response, f"Failed to update post #{post.id}"
                )
            updated = Post.model_validate(response.json())
            return ApiResponse.success_with(
                updated,
                message=f"Post #{post.id} updated successfully",
                status_code=response.status_code,
            )

        return self._execute("update_post", action)

    def patch_post(
        self,
        post_id: int,
        *,
        title: Optional[str] = None,
        body: Optional[str] = None,
    ) -> ApiResponse[Post]:
        """Send only the supplied fields with PATCH."""

        changes: Dict[str, Any] = {}
        if title is not None:
            changes["title"] = title
        if body is not None:
            changes["body"] = body
        if not changes:
            return ApiResponse.failure(
                "No fields to update",
                status_code=400,
                error_type="ValidationFailedError",
            )

        def action() -> ApiResponse[Post]:
            response = self._client.patch(post_endpoint(post_id), json=changes)
            if response.status_code != 200:
                return self._unexpected_status(
                    response, f"Failed to update post #{post_id}"
                )
            updated = Post.model_validate(response.json())
            return ApiResponse.success_with(
                updated,
                message=f"Post #{post_id} partially updated",
                status_code=response.status_code,
            )

        return self._execute("patch_post", action)

    def delete_post(self, post_id: int) -> ApiResponse[None]:
        def action() -> ApiResponse[None]:
            response = self._client.delete(post_endpoint(post_id))
            if response.status_code not in (200, 204):
                return self._unexpected_status(
                    response, f"Failed to delete post #{post_id}"
                )
            return ApiResponse(
                success=True,
                message=f"Post #{post_id} deleted successfully",
                status_code=response.status_code,
            )

        return self._execute("delete_post", action)
