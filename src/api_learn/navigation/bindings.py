"""Per-route dependency bindings.

A binding is tagged by ``BindingKind``; the kind selects the controller to
register from ``CONTROLLER_TABLE``. Bindings register lazily: the
controller is built the first time a screen reads it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional, Type

from api_learn.controllers.base import Controller
from api_learn.controllers.delete_request import DeleteRequestController
from api_learn.controllers.error_handling import ErrorHandlingController
from api_learn.controllers.file_upload import FileUploadController
from api_learn.controllers.get_request import GetRequestController
from api_learn.controllers.post_request import PostRequestController
from api_learn.controllers.update_request import UpdateRequestController
from api_learn.core.dependencies import DependencyContainer

logger = logging.getLogger(__name__)


class BindingKind(str, Enum):
    HOME = "home"
    GET_REQUEST = "get_request"
    POST_REQUEST = "post_request"
    UPDATE_REQUEST = "update_request"
    DELETE_REQUEST = "delete_request"
    FILE_UPLOAD = "file_upload"
    ERROR_HANDLING = "error_handling"


CONTROLLER_TABLE: Mapping[BindingKind, Optional[Type[Controller]]] = {
    BindingKind.HOME: None,
    BindingKind.GET_REQUEST: GetRequestController,
    BindingKind.POST_REQUEST: PostRequestController,
    BindingKind.UPDATE_REQUEST: UpdateRequestController,
    BindingKind.DELETE_REQUEST: DeleteRequestController,
    BindingKind.FILE_UPLOAD: FileUploadController,
    BindingKind.ERROR_HANDLING: ErrorHandlingController,
}


@dataclass(frozen=True)
class Binding:
    """Registers the controller of one route into the container."""

    kind: BindingKind

    @property
    def controller_type(self) -> Optional[Type[Controller]]:
        return CONTROLLER_TABLE[self.kind]

    def dependencies(self, container: DependencyContainer) -> None:
        controller_type = self.controller_type
        if controller_type is None:
            return

        def factory() -> Controller:
            return controller_type.from_container(container)

        registered = container.lazy_put(controller_type, factory)
        logger.debug(
            "route_bound",
            extra={
                "binding": self.kind.value,
                "controller": controller_type.__name__,
                "registered": registered,
            },
        )


def binding_for(kind: BindingKind) -> Binding:
    return _BINDINGS[kind]


_BINDINGS: Dict[BindingKind, Binding] = {kind: Binding(kind) for kind in BindingKind}

HomeBinding = _BINDINGS[BindingKind.HOME]
GetRequestBinding = _BINDINGS[BindingKind.GET_REQUEST]
PostRequestBinding = _BINDINGS[BindingKind.POST_REQUEST]
UpdateRequestBinding = _BINDINGS[BindingKind.UPDATE_REQUEST]
DeleteRequestBinding = _BINDINGS[BindingKind.DELETE_REQUEST]
FileUploadBinding = _BINDINGS[BindingKind.FILE_UPLOAD]
ErrorHandlingBinding = _BINDINGS[BindingKind.ERROR_HANDLING]
