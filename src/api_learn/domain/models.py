"""Domain value objects exchanged with the JSON placeholder API."""

from __future__ import annotations

import math
from typing import Any, Generic, List, Mapping, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Address(BaseModel):
    """Postal address nested inside a user record."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    street: str
    suite: str
    city: str
    zip_code: str = Field(..., alias="zipcode")

    @property
    def full_address(self) -> str:
        return f"{self.street}, {self.suite}, {self.city} {self.zip_code}"

    def __str__(self) -> str:
        return self.full_address


class User(BaseModel):
    """User record as served by ``/users``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    name: str
    username: str
    email: str
    address: Optional[Address] = None
    phone: Optional[str] = None
    website: Optional[str] = None


class Post(BaseModel):
    """Post record as served by ``/posts``."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    user_id: int = Field(..., alias="userId")
    title: str
    body: str

    def copy_with(self, **changes: Any) -> "Post":
        return self.model_copy(update=changes)

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class ApiErrorInfo(BaseModel):
    """Error details attached to a failed ``ApiResponse``."""

    model_config = ConfigDict(frozen=True)

    message: str
    type: str = "UnknownError"
    status_code: Optional[int] = None
    code: Optional[str] = None
    details: Optional[Mapping[str, Any]] = None

    def __str__(self) -> str:
        return f"ApiErrorInfo({self.type}): {self.message}"


class PaginationInfo(BaseModel):
    """Paging metadata for list endpoints."""

    model_config = ConfigDict(frozen=True)

    current_page: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)
    total_items: int = Field(..., ge=0)
    items_per_page: int = Field(..., ge=1)
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def from_totals(cls, *, page: int, limit: int, total: int) -> "PaginationInfo":
        return cls(
            current_page=page,
            total_pages=math.ceil(total / limit) if limit else 0,
            total_items=total,
            items_per_page=limit,
            has_next_page=page * limit < total,
            has_previous_page=page > 1,
        )

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "PaginationInfo":
        page = data.get("current_page", data.get("page", 1))
        return cls(
            current_page=page,
            total_pages=data.get("total_pages", data.get("totalPages", 1)),
            total_items=data.get("total_items", data.get("total", 0)),
            items_per_page=data.get("per_page", data.get("limit", 10)),
            has_next_page=data.get("has_next", data.get("hasMore", False)),
            has_previous_page=data.get("has_previous", page > 1),
        )


class ApiResponse(BaseModel, Generic[T]):
    """Uniform envelope returned by every service call."""

    model_config = ConfigDict(frozen=True)

    success: bool
    data: Optional[T] = None
    message: Optional[str] = None
    error: Optional[ApiErrorInfo] = None
    status_code: Optional[int] = None
    pagination: Optional[PaginationInfo] = None

    @property
    def is_success(self) -> bool:
        return self.success and self.error is None

    @property
    def has_data(self) -> bool:
        return self.data is not None

    @classmethod
    def success_with(
        cls,
        data: Any,
        *,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        pagination: Optional[PaginationInfo] = None,
    ) -> "ApiResponse[Any]":
        return cls(
            success=True,
            data=data,
            message=message or "Success",
            status_code=status_code if status_code is not None else 200,
            pagination=pagination,
        )

    @classmethod
    def failure(
        cls,
        error_message: str,
        *,
        status_code: Optional[int] = None,
        error_type: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
    ) -> "ApiResponse[Any]":
        return cls(
            success=False,
            message=error_message,
            error=ApiErrorInfo(
                message=error_message,
                type=error_type or "UnknownError",
                status_code=status_code,
                details=details,
            ),
            status_code=status_code,
        )


_KB = 1024
_MB = _KB * 1024
_GB = _MB * 1024


class FileUploadResponse(BaseModel):
    """Result of a single file upload."""

    model_config = ConfigDict(frozen=True)

    success: bool
    file_id: Optional[str] = None
    filename: Optional[str] = None
    file_size: Optional[int] = Field(default=None, ge=0)
    file_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    mime_type: Optional[str] = None
    message: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def from_json(cls, payload: Mapping[str, Any]) -> "FileUploadResponse":
        nested = payload.get("data")
        data: Mapping[str, Any] = nested if isinstance(nested, Mapping) else payload
        file_id = data.get("id", data.get("fileId"))
        return cls(
            success=payload.get("success", True),
            file_id=str(file_id) if file_id is not None else None,
            filename=data.get("filename", data.get("name")),
            file_size=data.get("size", data.get("fileSize")),
            file_url=data.get("url", data.get("fileUrl")),
            thumbnail_url=data.get("thumbnailUrl", data.get("thumb")),
            mime_type=data.get("mimeType", data.get("type")),
            message=payload.get("message"),
            error=payload.get("error"),
        )

    @property
    def formatted_size(self) -> str:
        size = self.file_size
        if size is None:
            return "Unknown"
        if size >= _GB:
            return f"{size / _GB:.2f} GB"
        if size >= _MB:
            return f"{size / _MB:.2f} MB"
        if size >= _KB:
            return f"{size / _KB:.2f} KB"
        return f"{size} bytes"


class UploadProgress(BaseModel):
    """Bytes sent versus bytes expected for an upload in flight."""

    model_config = ConfigDict(frozen=True)

    sent_bytes: int = Field(..., ge=0)
    total_bytes: int = Field(..., ge=0)

    @property
    def progress(self) -> float:
        if self.total_bytes == 0:
            return 0.0
        return self.sent_bytes / self.total_bytes

    @property
    def percentage(self) -> float:
        return self.progress * 100

    @property
    def progress_text(self) -> str:
        return f"{self.percentage:.1f}%"


def parse_posts(payload: Any) -> List[Post]:
    """Validate a JSON array of posts."""

    if not isinstance(payload, list):
        raise ValueError("expected a JSON array of posts")
    return [Post.model_validate(item) for item in payload]


def parse_users(payload: Any) -> List[User]:
    if not isinstance(payload, list):
        raise ValueError("expected a JSON array of users")
    return [User.model_validate(item) for item in payload]
