# storefront/api/deps.py
from storefront.utils.settings import USER_ID


def get_user_id() -> str:
    """Uzytkownik, dla ktorego wykonywane sa operacje koszyka i zamowien."""
    return USER_ID
