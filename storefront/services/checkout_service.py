# storefront/services/checkout_service.py
from datetime import datetime, timezone
from typing import Any, Dict, Sequence

from sqlalchemy.orm import Session

from storefront.domain.errors import ValidationError
from storefront.domain.schemas import CheckoutItemIn
from storefront.services.cart_service import CartService
from storefront.services.notification_service import NotificationService
from storefront.services.order_service import OrderService, is_valid_email
from storefront.tasks.cart_cleanup import clear_cart_task
from storefront.utils.logging import get_logger
from storefront.utils.money import lines_total

logger = get_logger(__name__)


class CheckoutService:
    """
    Zamiana przeslanych pozycji koszyka na zamowienie.

    Dwie osobne operacje, bez wspolnej transakcji:
    1. zapis zamowienia (po nim zamowienie jest trwale)
    2. usuniecie koszyka; jesli sie nie uda, zamowienie zostaje,
       czyszczenie idzie do kolejki (clear_cart_task) a wynik ma cart_cleared=False
    """

    def __init__(
        self,
        db: Session,
        order_service: OrderService | None = None,
        cart_service: CartService | None = None,
        notification_service: NotificationService | None = None,
    ):
        self.order_service = order_service or OrderService(db)
        self.cart_service = cart_service or CartService(db)
        self.notification_service = notification_service or NotificationService()

    def checkout(
        self,
        user_id: str,
        customer_name: str | None,
        customer_email: str | None,
        cart_items: Sequence[CheckoutItemIn],
    ) -> Dict[str, Any]:
        if not customer_name or not customer_email:
            raise ValidationError("Missing required fields: customerName, customerEmail")

        if not cart_items:
            raise ValidationError("Cart is empty. Cannot checkout")

        if not is_valid_email(customer_email):
            raise ValidationError("Invalid email format")

        # total z pozycji od klienta, nie z koszyka w bazie
        if any(i.price is None or i.quantity is None for i in cart_items):
            raise ValidationError("Every cart item needs a price and a quantity")

        try:
            total = lines_total((i.price, i.quantity) for i in cart_items)
        except ValueError:
            raise ValidationError("Item prices must be finite numbers")

        if total <= 0:
            raise ValidationError("Invalid total amount")

        order = self.order_service.create(
            user_id=user_id,
            customer_name=customer_name,
            customer_email=customer_email,
            cart_items=[i.model_dump() for i in cart_items],
            total=total,
            status="completed",
            timestamp=datetime.now(timezone.utc),
        )
        logger.info(f"Order created with ID: {order['id']}")

        cart_cleared = self._clear_cart(user_id, order["id"])

        receipt = {
            "order_id": order["id"],
            "customer_name": order["customer_name"],
            "customer_email": order["customer_email"],
            "total": order["total"],
            "item_count": len(cart_items),
            "timestamp": order["timestamp"],
            "status": order["status"],
            "cart_cleared": cart_cleared,
        }

        try:
            self.notification_service.send_order_receipt(receipt)
        except Exception as e:
            logger.warning(f"Could not queue receipt for order {order['id']}: {e}")

        return receipt

    def _clear_cart(self, user_id: str, order_id: str) -> bool:
        try:
            self.cart_service.clear_cart(user_id)
        except Exception as e:
            logger.error(
                f"Order {order_id} placed but cart for user {user_id} was not cleared: {e}"
            )
            try:
                clear_cart_task.delay(user_id)
            except Exception as queue_error:
                logger.error(f"Could not queue cart cleanup for user {user_id}: {queue_error}")
            return False

        logger.info(f"Cart cleared for user {user_id}")
        return True
