from modules.categories.dtos import (
    NAME_REQUIRED,
    CategoryOutputDTO,
    CreateCategoryDTO,
    UpdateCategoryDTO,
)
from modules.core.resources import ResourceDefinition

CATEGORY = ResourceDefinition(
    name="Category",
    plural="categories",
    table="categories",
    mutable_columns=("name",),
    ordering="name ASC",
    create_dto=CreateCategoryDTO,
    update_dto=UpdateCategoryDTO,
    output_dto=CategoryOutputDTO,
    empty_update_message=NAME_REQUIRED,
)
