# storefront/api/routers/checkout.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.api.deps import get_user_id
from storefront.api.responses import error_response, success
from storefront.data.database import get_db
from storefront.domain.schemas import CheckoutIn, CheckoutReceiptOut, OrderOut
from storefront.services.checkout_service import CheckoutService
from storefront.services.order_service import OrderService

router = APIRouter(prefix="/checkout", tags=["checkout"])


@router.post("")
def checkout(
    payload: CheckoutIn,
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    """
    Tworzy zamowienie z przeslanych pozycji i czysci koszyk.
    """
    svc = CheckoutService(db)
    try:
        receipt = svc.checkout(
            user_id=user_id,
            customer_name=payload.customer_name,
            customer_email=payload.customer_email,
            cart_items=payload.cart_items,
        )
    except Exception as e:
        return error_response(e, "Failed to process checkout")

    data = CheckoutReceiptOut.model_validate(receipt).model_dump(by_alias=True)
    return success("Order placed successfully", data, status_code=201)


@router.get("")
def get_orders(
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    svc = OrderService(db)
    try:
        orders = svc.list_by_user(user_id)
    except Exception as e:
        return error_response(e, "Failed to fetch orders")

    data = [OrderOut.model_validate(o).model_dump(by_alias=True) for o in orders]
    message = "Orders fetched successfully" if data else "No orders found"
    return success(message, data, count=len(data))


@router.get("/{order_id}")
def get_order(
    order_id: str,
    user_id: str = Depends(get_user_id),
    db: Session = Depends(get_db),
):
    """
    Pobiera szczegoly zamowienia, tylko wlasne zamowienia uzytkownika.
    """
    svc = OrderService(db)
    try:
        order = svc.get_by_id_for_user(order_id, user_id)
    except Exception as e:
        return error_response(e, "Failed to fetch order")

    return success("Order fetched successfully", OrderOut.model_validate(order).model_dump(by_alias=True))
