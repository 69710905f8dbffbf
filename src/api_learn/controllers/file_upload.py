"""Controller for the file upload screen."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

from api_learn.domain.models import FileUploadResponse, UploadProgress
from api_learn.services.file_upload_service import FileUploadService

from .base import Controller
from .status import StatusKind

if TYPE_CHECKING:  # pragma: no cover
    from api_learn.core.dependencies import DependencyContainer


class FileUploadController(Controller):
    def __init__(self, upload_service: FileUploadService) -> None:
        super().__init__()
        self._upload_service = upload_service
        self.upload_history: List[FileUploadResponse] = []
        self.reset_upload()

    @classmethod
    def _build(cls, container: "DependencyContainer") -> "FileUploadController":
        return cls(container.find(FileUploadService))

    def select_file(self, path: str | Path) -> bool:
        """Select ``path`` for upload if it exists and fits the size limit.

        A rejected file clears any previous selection.
        """

        selected = Path(path)
        if not selected.is_file():
            self._reject_selection(f"File not found: {selected}")
            return False

        size = selected.stat().st_size
        max_size = self._upload_service.max_file_size
        if size > max_size:
            self._reject_selection(self._too_large_message(max_size))
            return False

        self.selected_file_path = selected
        self.selected_file_name = selected.name
        self.file_size = size
        self.status = StatusKind.IDLE
        self.status_message = f"File selected: {self.selected_file_name}"
        return True

    def upload_file(self) -> Optional[FileUploadResponse]:
        if self.selected_file_path is None:
            self.status = StatusKind.WARNING
            self.status_message = "Please select a file first"
            return None

        max_size = self._upload_service.max_file_size
        if self.file_size > max_size:
            self.status = StatusKind.ERROR
            self.status_message = self._too_large_message(max_size)
            return None

        self.is_uploading = True
        self._on_progress(UploadProgress(sent_bytes=0, total_bytes=self.file_size))
        self.status = StatusKind.LOADING
        self.status_message = "Uploading..."

        response = self._upload_service.upload_file(
            self.selected_file_path, on_progress=self._on_progress
        )
        self.is_uploading = False

        if response.is_success and response.has_data:
            result = response.data
            self.upload_progress = 1.0
            self.progress_text = "100%"
            self.status = StatusKind.SUCCESS
            self.status_message = f"Upload successful! Filename: {result.filename}"
            self.last_upload_result = result
            self.upload_history.insert(0, result)
            return result

        message = response.error.message if response.error else "Upload failed"
        self.status = StatusKind.ERROR
        self.status_message = f"Upload failed: {message}"
        return None

    def reset_upload(self) -> None:
        self.selected_file_path: Optional[Path] = None
        self.selected_file_name = ""
        self.file_size = 0
        self.is_uploading = False
        self.upload_progress = 0.0
        self.progress_text = "0%"
        self.status = StatusKind.IDLE
        self.status_message: Optional[str] = None
        self.last_upload_result: Optional[FileUploadResponse] = None

    def _on_progress(self, progress: UploadProgress) -> None:
        self.upload_progress = progress.progress
        self.progress_text = progress.progress_text
        self.status_message = f"Uploading: {progress.progress_text}"

    def _reject_selection(self, message: str) -> None:
        self.selected_file_path = None
        self.selected_file_name = ""
        self.file_size = 0
        self.status = StatusKind.ERROR
        self.status_message = message

    @staticmethod
    def _too_large_message(max_size: int) -> str:
        return f"File too large. Maximum: {max_size // (1024 * 1024)}MB"
