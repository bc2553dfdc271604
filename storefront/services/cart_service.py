# storefront/services/cart_service.py
from decimal import Decimal
from typing import Dict, Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel
from storefront.domain.errors import CartConflictError, NotFoundError, ValidationError
from storefront.domain.schemas import CartItemIn
from storefront.repos.cart_repo import CartRepo
from storefront.utils.logging import get_logger
from storefront.utils.money import lines_total, round_money, to_decimal
from storefront.utils.retry import conflict_retry

logger = get_logger(__name__)

REQUIRED_ITEM_FIELDS = ("product_id", "title", "price", "quantity", "image")


def parse_product_id(product_id) -> int:
    """Identyfikator produktu ze sciezki URL musi byc liczba calkowita."""
    if product_id is None or isinstance(product_id, bool):
        raise ValidationError("Invalid product ID")
    try:
        return int(str(product_id).strip())
    except ValueError:
        raise ValidationError("Invalid product ID")


class CartService:
    """
    Use case'y koszyka, jeden koszyk na user_id
    commands (add, update, remove, clear) modyfikuja stan i podbijaja version
    query (get) tylko odczyt, liczy total i itemCount
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)

    #query - odczyt
    def get_cart(self, user_id: str) -> Dict[str, Any]:
        cart = self.repo.get_cart_by_user(user_id)

        if not cart:
            # brak koszyka to nie blad, zwracamy pusty
            return {
                "user_id": user_id,
                "items": [],
                "total": Decimal("0.00"),
                "item_count": 0,
            }

        data = self._cart_to_dict(cart)
        data["total"] = lines_total((i.price, i.quantity) for i in cart.items)
        # liczba roznych pozycji, nie suma ilosci
        data["item_count"] = len(cart.items)
        return data

    #commands
    @conflict_retry()
    def add_item(self, user_id: str, item: CartItemIn) -> Dict[str, Any]:
        missing = [f for f in REQUIRED_ITEM_FIELDS if getattr(item, f) in (None, "")]
        if missing:
            raise ValidationError(
                "Missing required fields: productId, title, price, quantity, image"
            )

        # id produktow z katalogu zaczynaja sie od 1
        if item.product_id <= 0:
            raise ValidationError("Invalid product ID")

        if item.quantity <= 0:
            raise ValidationError("Quantity must be greater than 0")

        try:
            price = round_money(to_decimal(item.price))
        except ValueError:
            raise ValidationError("Price must be a finite number")

        if price < 0:
            raise ValidationError("Price cannot be negative")

        cart = self.repo.get_cart_by_user(user_id)

        if not cart:
            logger.info(f"Tworze koszyk dla uzytkownika {user_id}")
            try:
                cart = self.repo.create_cart(CartModel(user_id=user_id, version=1))
            except IntegrityError:
                # ktos inny utworzyl koszyk rownolegle, ponow na istniejacym
                self.repo.rollback()
                raise CartConflictError("Cart was created concurrently")

        existing_item = self.repo.get_cart_item(cart, item.product_id)

        if existing_item:
            logger.info(
                f"Produkt {item.product_id} juz jest w koszyku, zwiekszam ilosc "
                f"z {existing_item.quantity} do {existing_item.quantity + item.quantity}"
            )
            # tylko ilosc, cena/tytul/obrazek zostaja z pierwszego dodania
            existing_item.quantity += item.quantity
        else:
            logger.info(f"Dodaje nowy produkt {item.product_id} do koszyka uzytkownika {user_id}")
            self.repo.add_cart_item(
                cart,
                CartItemModel(
                    product_id=item.product_id,
                    title=item.title,
                    price=price,
                    quantity=item.quantity,
                    image=item.image,
                ),
            )

        try:
            self.repo.flush()
        except IntegrityError:
            # ta sama pozycja dodana rownolegle, ponowienie trafi w galaz merge
            self.repo.rollback()
            raise CartConflictError("Cart line was added concurrently")

        self._bump_version(cart)
        self.repo.commit()

        return self._cart_to_dict(cart)

    @conflict_retry()
    def remove_item(self, user_id: str, product_id) -> Dict[str, Any]:
        pid = parse_product_id(product_id)

        cart = self.repo.get_cart_by_user(user_id)

        if not cart:
            raise NotFoundError("Cart not found")

        # brak pozycji to no-op, koszyk wraca bez zmian
        removed = self.repo.delete_cart_item(cart, pid)
        logger.info(f"Usunieto {removed} pozycji produktu {pid} z koszyka uzytkownika {user_id}")

        self._bump_version(cart)
        self.repo.commit()

        return self._cart_to_dict(cart)

    @conflict_retry()
    def update_item_quantity(self, user_id: str, product_id, quantity) -> Dict[str, Any]:
        pid = parse_product_id(product_id)

        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity <= 0:
            raise ValidationError("Quantity must be greater than 0")

        cart = self.repo.get_cart_by_user(user_id)

        if not cart:
            raise NotFoundError("Cart not found")

        item = self.repo.get_cart_item(cart, pid)

        if not item:
            raise NotFoundError("Item not found in cart")

        logger.info(f"Ustawiam ilosc produktu {pid} na {quantity} (bylo {item.quantity})")
        item.quantity = quantity

        self._bump_version(cart)
        self.repo.commit()

        return self._cart_to_dict(cart)

    def clear_cart(self, user_id: str) -> bool:
        cart = self.repo.get_cart_by_user(user_id)

        if not cart:
            return False

        self.repo.delete_cart(cart)
        self.repo.commit()

        logger.info(f"Koszyk uzytkownika {user_id} usuniety")
        return True

    def _bump_version(self, cart: CartModel):
        # Optimistic locking warunek na wersje
        # np w bazie update set version 2 where id 1 and version 1
        rowcount = self.repo.update_cart_version(cart.id, cart.version)

        if rowcount == 0:
            self.repo.rollback()
            raise CartConflictError(
                "Cart was modified by another request"
            )

    @staticmethod
    def _cart_to_dict(cart: CartModel) -> Dict[str, Any]:
        return {
            "id": cart.id,
            "user_id": cart.user_id,
            "version": cart.version,
            "items": [
                {
                    "product_id": i.product_id,
                    "title": i.title,
                    "price": i.price,
                    "quantity": i.quantity,
                    "image": i.image,
                }
                for i in cart.items
            ],
            "created_at": cart.created_at,
            "updated_at": cart.updated_at,
        }
