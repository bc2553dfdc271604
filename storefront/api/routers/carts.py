# storefront/api/routers/carts.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import get_user_id
from storefront.api.responses import error_response, success
from storefront.data.database import get_db
from storefront.domain.schemas import CartItemIn, CartOut, CartSummaryOut, QuantityIn
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])


def get_service(db: Session):
    return CartService(db)


def _dump(schema, data: dict) -> dict:
    return schema.model_validate(data).model_dump(by_alias=True, exclude_none=True)


@router.post("")
def add_to_cart(
    payload: CartItemIn,
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        cart = svc.add_item(user_id, payload)
    except Exception as e:
        return error_response(e, "Failed to add item to cart")

    return success("Item added to cart successfully", _dump(CartOut, cart), status_code=201)


@router.get("")
def get_cart(
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        cart = svc.get_cart(user_id)
    except Exception as e:
        return error_response(e, "Failed to fetch cart")

    message = "Cart fetched successfully" if cart["items"] else "Cart is empty"
    return success(message, _dump(CartSummaryOut, cart))


@router.delete("")
def clear_cart(
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        cleared = svc.clear_cart(user_id)
    except Exception as e:
        return error_response(e, "Failed to clear cart")

    return success("Cart cleared successfully", {"cleared": cleared})


@router.delete("/{product_id}")
def remove_from_cart(
    product_id: str,
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        cart = svc.remove_item(user_id, product_id)
    except Exception as e:
        return error_response(e, "Failed to remove item from cart")

    return success("Item removed from cart successfully", _dump(CartOut, cart))


@router.patch("/{product_id}")
def update_cart_item(
    product_id: str,
    payload: QuantityIn,
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        cart = svc.update_item_quantity(user_id, product_id, payload.quantity)
    except Exception as e:
        return error_response(e, "Failed to update item")

    return success("Item quantity updated successfully", _dump(CartOut, cart))
