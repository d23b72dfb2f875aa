from modules.core.resources import ResourceDefinition
from modules.products.dtos import CreateProductDTO, ProductOutputDTO, UpdateProductDTO

PRODUCT = ResourceDefinition(
    name="Product",
    plural="products",
    table="products",
    mutable_columns=("name", "price", "stock", "category_id"),
    ordering="created_at DESC, id DESC",
    create_dto=CreateProductDTO,
    update_dto=UpdateProductDTO,
    output_dto=ProductOutputDTO,
)
