"""Static description of a catalog resource.

A ``ResourceDefinition`` is everything the generic repository, service and
viewset need to know to serve the five standard operations (list, get,
create, update, delete) for one table.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Type

from pydantic import BaseModel


@dataclass(frozen=True)
class ResourceDefinition:
    name: str
    plural: str
    table: str
    mutable_columns: Tuple[str, ...]
    ordering: str
    create_dto: Type[BaseModel]
    update_dto: Type[BaseModel]
    output_dto: Type[BaseModel]
    empty_update_message: str = "No fields to update"

    @property
    def key(self) -> str:
        """Lower-case singular name, used in log events and messages."""
        return self.name.lower()

    @property
    def not_found_message(self) -> str:
        return f"{self.name} not found"

    def success_message(self, verb: str) -> str:
        return f"{self.name} {verb} successfully"

    def failure_message(self, action: str, *, many: bool = False) -> str:
        """Fixed message shown to callers when the store fails."""
        return f"Error {action} {self.plural if many else self.key}"
