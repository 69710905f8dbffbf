"""Multipart file uploads with size validation and progress reporting."""

from __future__ import annotations

import mimetypes
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple

from api_learn.domain.models import ApiResponse, FileUploadResponse, UploadProgress

from .base import BaseApiService

ProgressCallback = Callable[[UploadProgress], None]

MULTI_UPLOAD_SIZE_FACTOR = 5
UPLOAD_DESCRIPTION = "Uploaded from API Learn"


def _content_type(file_name: str) -> str:
    guessed, _ = mimetypes.guess_type(file_name)
    return guessed or "application/octet-stream"


def _report(callback: Optional[ProgressCallback], sent: int, total: int) -> None:
    if callback is not None:
        callback(UploadProgress(sent_bytes=sent, total_bytes=total))


class FileUploadService(BaseApiService):
    """Uploads files to the configured upload endpoint.

    httpx does not expose send progress for multipart bodies, so progress
    is reported twice per upload: before the request (0 bytes) and after
    a successful response (all bytes).
    """

    @property
    def max_file_size(self) -> int:
        return self._client.config.max_file_size

    @property
    def upload_url(self) -> str:
        return self._client.config.file_upload_url

    def upload_file(
        self, file_path: str | Path, *, on_progress: Optional[ProgressCallback] = None
    ) -> ApiResponse[FileUploadResponse]:
        path = Path(file_path)
        if not path.is_file():
            return ApiResponse.failure(
                f"File not found: {path}", error_type="FileNotFoundError"
            )
        file_size = path.stat().st_size
        if file_size > self.max_file_size:
            return ApiResponse.failure(
                f"File too large. Maximum size is {self.max_file_size // (1024 * 1024)}MB",
                error_type="FileTooLargeError",
            )

        def action() -> ApiResponse[FileUploadResponse]:
            content = path.read_bytes()
            _report(on_progress, 0, file_size)
            response = self._client.upload(
                self.upload_url,
                files={"file": (path.name, content, _content_type(path.name))},
                data={
                    "description": UPLOAD_DESCRIPTION,
                    "timestamp": datetime.now(timezone.utc).isoformat(),
                },
            )
            if response.status_code not in (200, 201):
                return self._unexpected_status(response, "File upload failed")
            _report(on_progress, file_size, file_size)
            return ApiResponse.success_with(
                FileUploadResponse(
                    success=True,
                    filename=path.name,
                    file_size=file_size,
                    mime_type=_content_type(path.name),
                    message="File uploaded successfully",
                ),
                message="File uploaded successfully",
                status_code=response.status_code,
            )

        return self._execute("upload_file", action)

    def upload_multiple_files(
        self,
        file_paths: Sequence[str | Path],
        *,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ApiResponse[List[FileUploadResponse]]:
        if not file_paths:
            return ApiResponse.failure("No files selected", error_type="ValidationFailedError")

        total_size = 0
        parts: List[Tuple[str, Tuple[str, bytes, str]]] = []
        for raw_path in file_paths:
            path = Path(raw_path)
            if not path.is_file():
                return ApiResponse.failure(
                    f"File not found: {path}", error_type="FileNotFoundError"
                )
            total_size += path.stat().st_size
            if total_size > self.max_file_size * MULTI_UPLOAD_SIZE_FACTOR:
                return ApiResponse.failure(
                    "Total file size too large", error_type="FileTooLargeError"
                )
            parts.append(
                ("files", (path.name, path.read_bytes(), _content_type(path.name)))
            )

        def action() -> ApiResponse[List[FileUploadResponse]]:
            _report(on_progress, 0, total_size)
            response = self._client.upload(self.upload_url, files=parts)
            if response.status_code not in (200, 201):
                return self._unexpected_status(response, "Failed to upload files")
            _report(on_progress, total_size, total_size)
            results = [
                FileUploadResponse(
                    success=True,
                    filename=name,
                    file_size=len(content),
                    message="Uploaded successfully",
                )
                for _, (name, content, _) in parts
            ]
            return ApiResponse.success_with(
                results,
                message=f"{len(results)} files uploaded successfully",
                status_code=response.status_code,
            )

        return self._execute("upload_multiple_files", action)

    def upload_file_with_data(
        self,
        file_path: str | Path,
        *,
        additional_data: Mapping[str, Any],
        on_progress: Optional[ProgressCallback] = None,
    ) -> ApiResponse[FileUploadResponse]:
        path = Path(file_path)
        if not path.is_file():
            return ApiResponse.failure(
                f"File not found: {path}", error_type="FileNotFoundError"
            )

        def action() -> ApiResponse[FileUploadResponse]:
            content = path.read_bytes()
            _report(on_progress, 0, len(content))
            response = self._client.upload(
                self.upload_url,
                files={"file": (path.name, content, _content_type(path.name))},
                data={key: str(value) for key, value in additional_data.items()},
            )
            if response.status_code not in (200, 201):
                return self._unexpected_status(response, "Upload failed")
            _report(on_progress, len(content), len(content))
            return ApiResponse.success_with(
                FileUploadResponse(
                    success=True,
                    filename=path.name,
                    file_size=len(content),
                    message="File and data uploaded successfully",
                ),
                message="Upload successful",
                status_code=response.status_code,
            )

        return self._execute("upload_file_with_data", action)

    def upload_file_from_bytes(
        self,
        content: bytes,
        *,
        file_name: str,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ApiResponse[FileUploadResponse]:
        if len(content) > self.max_file_size:
            return ApiResponse.failure(
                f"File too large. Maximum size is {self.max_file_size // (1024 * 1024)}MB",
                error_type="FileTooLargeError",
            )

        def action() -> ApiResponse[FileUploadResponse]:
            _report(on_progress, 0, len(content))
            response = self._client.upload(
                self.upload_url,
                files={"file": (file_name, content, _content_type(file_name))},
            )
            if response.status_code not in (200, 201):
                return self._unexpected_status(response, "Upload failed")
            _report(on_progress, len(content), len(content))
            return ApiResponse.success_with(
                FileUploadResponse(
                    success=True,
                    filename=file_name,
                    file_size=len(content),
                    message="File uploaded successfully",
                ),
                message="Upload successful",
                status_code=response.status_code,
            )

        return self._execute("upload_file_from_bytes", action)
