# storefront/domain/schemas.py
from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Pola w Pythonie snake_case, w JSON camelCase (productId, itemCount...)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        allow_inf_nan=False,
    )


# =====================================================
# REQUEST
# =====================================================
class CartItemIn(CamelModel):
    """Pozycja dodawana do koszyka; braki sprawdza CartService."""

    product_id: int | None = None
    title: str | None = None
    price: float | None = None
    quantity: int | None = None
    image: str | None = None


class QuantityIn(CamelModel):
    quantity: int | None = None


class CheckoutItemIn(CartItemIn):
    """Pozycja przeslana przy zamowieniu (klient podaje cene i ilosc)."""


class CheckoutIn(CamelModel):
    customer_name: str | None = None
    customer_email: str | None = None
    cart_items: List[CheckoutItemIn] = Field(default_factory=list)


# =====================================================
# RESPONSE
# =====================================================
class CartItemOut(CamelModel):
    product_id: int
    title: str
    price: float
    quantity: int
    image: str


class CartOut(CamelModel):
    id: int | None = None
    user_id: str
    items: List[CartItemOut]
    version: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CartSummaryOut(CartOut):
    total: float
    item_count: int


class OrderItemOut(CartItemOut):
    pass


class OrderOut(CamelModel):
    id: str
    user_id: str
    cart_items: List[OrderItemOut]
    customer_name: str
    customer_email: str
    total: float
    status: str
    timestamp: datetime
    created_at: datetime | None = None


class CheckoutReceiptOut(CamelModel):
    order_id: str
    customer_name: str
    customer_email: str
    total: float
    item_count: int
    timestamp: datetime
    status: str
    cart_cleared: bool
