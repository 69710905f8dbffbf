"""Read-only access to the ``/users`` resource."""

from __future__ import annotations

from typing import List

from api_learn.core.config import USERS_ENDPOINT, user_endpoint
from api_learn.domain.models import ApiResponse, User, parse_users

from .base import BaseApiService


class UserApiService(BaseApiService):
    def get_all_users(self) -> ApiResponse[List[User]]:
        def action() -> ApiResponse[List[User]]:
            response = self._client.get(USERS_ENDPOINT)
            if response.status_code != 200:
                return self._unexpected_status(response, "Failed to fetch users")
            users = parse_users(response.json())
            return ApiResponse.success_with(
                users,
                message=f"Successfully fetched {len(users)} users",
                status_code=response.status_code,
            )

        return self._execute("get_all_users", action)

    def get_user_by_id(self, user_id: int) -> ApiResponse[User]:
        def action() -> ApiResponse[User]:
            response = self._client.get(user_endpoint(user_id))
            if response.status_code == 404:
                return ApiResponse.failure(
                    f"User with ID {user_id} not found",
                    status_code=404,
                    error_type="NotFoundError",
                )
            if response.status_code != 200:
                return self._unexpected_status(
                    response, f"Failed to fetch user #{user_id}"
                )
            user = User.model_validate(response.json())
            return ApiResponse.success_with(
                user,
                message=f"Successfully fetched user #{user_id}",
                status_code=response.status_code,
            )

        return self._execute("get_user_by_id", action)
