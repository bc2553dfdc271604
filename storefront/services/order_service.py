# storefront/services/order_service.py
import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Sequence

from sqlalchemy.orm import Session

from storefront.data.models.order import ORDER_STATUSES, OrderModel
from storefront.data.models.order_item import OrderItemModel
from storefront.domain.errors import NotFoundError, ValidationError
from storefront.repos.order_repo import OrderRepo
from storefront.utils.logging import get_logger
from storefront.utils.money import round_money, to_decimal

logger = get_logger(__name__)

EMAIL_RE = re.compile(r"^\w+([.-]?\w+)*@\w+([.-]?\w+)*(\.\w{2,3})+$", re.ASCII)


def is_valid_email(email) -> bool:
    return isinstance(email, str) and EMAIL_RE.match(email) is not None


class OrderService:
    """
    Serwis odpowiedzialny za domene zamowien.
    Zamowienie po utworzeniu jest niezmienne, brak update/delete.
    """

    def __init__(self, db: Session):
        self.db = db
        self.repo = OrderRepo(db)

    def create(
        self,
        user_id: str,
        customer_name: str,
        customer_email: str,
        cart_items: Sequence[Dict[str, Any]],
        total,
        status: str = "completed",
        timestamp: datetime | None = None,
    ) -> Dict[str, Any]:
        """
        Use Case: Zapis zamowienia.

        Waliduje wszystkie pola (email, total >= 0, pozycje z cena >= 0
        i iloscia >= 1), zapisuje zamowienie wraz z kopia pozycji.
        """
        name = (customer_name or "").strip()
        if not name:
            raise ValidationError("Customer name is required")

        if not is_valid_email(customer_email):
            raise ValidationError("Invalid email")

        if status not in ORDER_STATUSES:
            raise ValidationError(f"Invalid order status: {status}")

        if not cart_items:
            raise ValidationError("Order must contain at least one item")

        try:
            order_total = to_decimal(total)
        except ValueError:
            raise ValidationError("Invalid total amount")

        if order_total < 0:
            raise ValidationError("Total cannot be negative")

        order = OrderModel(
            user_id=user_id,
            customer_name=name,
            customer_email=customer_email,
            total=round_money(order_total),
            status=status,
            timestamp=timestamp or datetime.now(timezone.utc),
            cart_items=[self._build_item(raw) for raw in cart_items],
        )

        created = self.repo.create_order(order)

        logger.info(f"Order {created.id} created for user {user_id}, total {created.total}")

        return self._order_to_dict(created)

    def list_by_user(self, user_id: str) -> List[Dict[str, Any]]:
        """
        Use Case: Lista zamowien uzytkownika, najnowsze pierwsze.
        """
        return [self._order_to_dict(o) for o in self.repo.list_orders_for_user(user_id)]

    def get_by_id_for_user(self, order_id: str, user_id: str) -> Dict[str, Any]:
        """
        Use Case: Pobranie zamowienia (Query).
        Cudze zamowienie traktowane jak nieistniejace.
        """
        if not order_id or not str(order_id).strip():
            raise ValidationError("Order ID is required")

        order = self.repo.get_order_for_user(str(order_id).strip(), user_id)

        if not order:
            raise NotFoundError("Order not found")

        return self._order_to_dict(order)

    @staticmethod
    def _build_item(raw: Dict[str, Any]) -> OrderItemModel:
        product_id = raw.get("product_id")
        title = raw.get("title")
        image = raw.get("image")

        if product_id is None or not title or not image:
            raise ValidationError("Order item requires productId, title and image")

        try:
            price = to_decimal(raw.get("price"))
            quantity = int(raw.get("quantity"))
        except (TypeError, ValueError):
            raise ValidationError("Order item requires numeric price and quantity")

        if price < 0:
            raise ValidationError("Item price cannot be negative")

        if quantity < 1:
            raise ValidationError("Item quantity must be at least 1")

        return OrderItemModel(
            product_id=int(product_id),
            title=title,
            price=round_money(price),
            quantity=quantity,
            image=image,
        )

    @staticmethod
    def _order_to_dict(order: OrderModel) -> Dict[str, Any]:
        return {
            "id": order.id,
            "user_id": order.user_id,
            "cart_items": [
                {
                    "product_id": i.product_id,
                    "title": i.title,
                    "price": i.price,
                    "quantity": i.quantity,
                    "image": i.image,
                }
                for i in order.cart_items
            ],
            "customer_name": order.customer_name,
            "customer_email": order.customer_email,
            "total": order.total,
            "status": order.status,
            "timestamp": order.timestamp,
            "created_at": order.created_at,
        }
