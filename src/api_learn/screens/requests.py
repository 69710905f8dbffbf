"""Screens demonstrating one HTTP pattern each."""

from __future__ import annotations

from api_learn.controllers.delete_request import DeleteRequestController
from api_learn.controllers.error_handling import ErrorHandlingController
from api_learn.controllers.file_upload import FileUploadController
from api_learn.controllers.get_request import GetRequestController
from api_learn.controllers.post_request import PostRequestController
from api_learn.controllers.update_request import UpdateRequestController
from api_learn.navigation.paths import AppRoutes

from .base import Screen


class GetRequestScreen(Screen[GetRequestController]):
    title = "GET Requests"
    route_name = AppRoutes.GET_REQUEST
    controller_type = GetRequestController


class PostRequestScreen(Screen[PostRequestController]):
    title = "POST Requests"
    route_name = AppRoutes.POST_REQUEST
    controller_type = PostRequestController


class UpdateRequestScreen(Screen[UpdateRequestController]):
    title = "UPDATE Requests"
    route_name = AppRoutes.UPDATE_REQUEST
    controller_type = UpdateRequestController


class DeleteRequestScreen(Screen[DeleteRequestController]):
    title = "DELETE Requests"
    route_name = AppRoutes.DELETE_REQUEST
    controller_type = DeleteRequestController


class FileUploadScreen(Screen[FileUploadController]):
    title = "File Upload"
    route_name = AppRoutes.FILE_UPLOAD
    controller_type = FileUploadController


class ErrorHandlingScreen(Screen[ErrorHandlingController]):
    title = "Error Handling"
    route_name = AppRoutes.ERROR_HANDLING
    controller_type = ErrorHandlingController
