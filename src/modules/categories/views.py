"""Category API views.

Exposes ``CategoryService`` over HTTP through the generic
``ResourceViewSet``; all SQL access goes through the service/repository
layer.
"""

from __future__ import annotations

from modules.categories.repositories.sql_repository import CategorySQLRepository
from modules.categories.resources import CATEGORY
from modules.categories.services import CategoryService
from modules.core.views import ResourceViewSet


class CategoryViewSet(ResourceViewSet):
    definition = CATEGORY

    def build_service(self) -> CategoryService:
        return CategoryService(repository=CategorySQLRepository())
