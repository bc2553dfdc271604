# storefront/api/routers/products.py
from fastapi import APIRouter, Depends

from storefront.api.responses import error_response, failure, success
from storefront.services.product_client import ProductClient
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


def get_product_client() -> ProductClient:
    return ProductClient()


@router.get("")
def list_products(client: ProductClient = Depends(get_product_client)):
    try:
        products = client.list_products()
    except Exception as e:
        return error_response(e, "Failed to fetch products")

    return success("Products fetched successfully", products, count=len(products))


@router.get("/{product_id}")
def get_product(product_id: str, client: ProductClient = Depends(get_product_client)):
    try:
        product = client.get_product(product_id)
    except Exception as e:
        # kazdy blad pojedynczego produktu raportowany jako 404
        logger.warning(f"Product {product_id} lookup failed: {e}")
        return failure(404, "Product not found", str(e))

    return success("Product fetched successfully", product)
