# storefront/repos/cart_repo.py
from datetime import datetime, timezone

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel
from storefront.domain.errors import PersistenceError


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def get_cart_by_user(self, user_id: str) -> CartModel | None:
        return self.db.execute(
            select(CartModel).where(CartModel.user_id == user_id)
        ).scalar_one_or_none()

    def create_cart(self, cart: CartModel) -> CartModel:
        # flush bez commita, koszyk powstaje w tej samej transakcji co pierwsza pozycja
        self.db.add(cart)
        self.db.flush()
        return cart

    def get_cart_item(self, cart: CartModel, product_id: int) -> CartItemModel | None:
        for item in cart.items:
            if item.product_id == product_id:
                return item
        return None

    def add_cart_item(self, cart: CartModel, item: CartItemModel) -> CartItemModel:
        cart.items.append(item)
        return item

    def delete_cart_item(self, cart: CartModel, product_id: int) -> int:
        matching = [i for i in cart.items if i.product_id == product_id]
        for item in matching:
            cart.items.remove(item)
        return len(matching)

    def delete_cart(self, cart: CartModel) -> None:
        self.db.delete(cart)

    def update_cart_version(self, cart_id: int, old_version: int) -> int:
        """
        UPDATE carts SET version = old + 1 WHERE id = :id AND version = :old
        Zwraca liczbe zmienionych wierszy, 0 oznacza konflikt wspolbieznosci.
        """
        result = self.db.execute(
            update(CartModel)
            .where(CartModel.id == cart_id, CartModel.version == old_version)
            .values(version=old_version + 1, updated_at=datetime.now(timezone.utc))
        )
        return result.rowcount

    def flush(self):
        self.db.flush()

    def commit(self):
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Failed to save cart: {e}") from e

    def rollback(self):
        self.db.rollback()
