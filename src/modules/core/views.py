"""Health check and the generic HTTP surface shared by catalog resources.

``ResourceViewSet`` maps the five service operations onto DRF actions and
renders every outcome as a ``{success, data?, message?}`` envelope.
"""

import time
from abc import ABCMeta, abstractmethod
from typing import Any, Dict, Iterable, List

import structlog
from django.db import connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.exceptions import CatalogError
from modules.core.repositories.interfaces import Row
from modules.core.resources import ResourceDefinition
from modules.core.responses import error_response, success_response
from modules.core.services import ResourceService

logger = structlog.get_logger(__name__)


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}
    overall_healthy = True

    try:
        start = time.monotonic()
        conn = connections["default"]
        conn.ensure_connection()
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        services["database"] = {
            "status": "up",
            "response_time_ms": round((time.monotonic() - start) * 1000, 2),
        }
    except Exception:
        services["database"] = {"status": "down"}
        overall_healthy = False
        logger.error("health_check_db_failure")

    status_code = 200 if overall_healthy else 503

    logger.info(
        "health_check_completed", status="healthy" if overall_healthy else "unhealthy"
    )

    return JsonResponse(
        {
            "status": "healthy" if overall_healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=status_code,
    )


class ResourceViewSet(ViewSet, metaclass=ABCMeta):
    """Standard five-operation HTTP surface for a catalog resource.

    Subclasses set ``definition`` and implement ``build_service``.  Every
    outcome, success or failure, leaves as a ``{success, data?, message?}``
    envelope; domain exceptions are translated by ``error_response`` and
    anything else propagates.
    """

    definition: ResourceDefinition

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = self.build_service()

    @abstractmethod
    def build_service(self) -> ResourceService:
        """Wire the resource's service to its concrete repositories."""

    def serialize(self, row: Row) -> Dict[str, Any]:
        dto = self.definition.output_dto.model_validate(row)
        return dto.model_dump(mode="json", exclude_unset=True)

    def serialize_many(self, rows: Iterable[Row]) -> List[Dict[str, Any]]:
        return [self.serialize(row) for row in rows]

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/{resources}"""
        try:
            rows = self._service.list()
        except CatalogError as exc:
            return error_response(exc, self.definition.failure_message("fetching", many=True))
        return success_response(self.serialize_many(rows))

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/{resources}/{pk}"""
        try:
            row = self._service.get(pk)
        except CatalogError as exc:
            return error_response(exc, self.definition.failure_message("fetching"))
        return success_response(self.serialize(row))

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/{resources}"""
        try:
            row = self._service.create(request.data)
        except CatalogError as exc:
            return error_response(exc, self.definition.failure_message("creating"))
        return success_response(
            self.serialize(row),
            self.definition.success_message("created"),
            status.HTTP_201_CREATED,
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/{resources}/{pk}"""
        try:
            row = self._service.update(pk, request.data)
        except CatalogError as exc:
            return error_response(exc, self.definition.failure_message("updating"))
        return success_response(
            self.serialize(row), self.definition.success_message("updated")
        )

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/{resources}/{pk}"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/{resources}/{pk}"""
        try:
            self._service.delete(pk)
        except CatalogError as exc:
            return error_response(exc, self.definition.failure_message("deleting"))
        return success_response(message=self.definition.success_message("deleted"))
