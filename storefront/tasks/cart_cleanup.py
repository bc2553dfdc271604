# storefront/tasks/cart_cleanup.py
from storefront.celery_worker import celery_app
from storefront.data.database import SessionLocal
from storefront.services.cart_service import CartService
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@celery_app.task(
    name="storefront.tasks.cart_cleanup.clear_cart_task",
    autoretry_for=(Exception,),
    retry_backoff=True,
    max_retries=5,
)
def clear_cart_task(user_id: str):
    """
    Druga faza checkoutu: zamowienie juz zapisane, koszyk nie zostal usuniety.
    """
    logger.info(f"Clear cart task started for user {user_id}")

    db = SessionLocal()
    try:
        cleared = CartService(db).clear_cart(user_id)
        logger.info(f"Cart for user {user_id} cleared: {cleared}")
        return {"user_id": user_id, "cleared": cleared}
    finally:
        db.close()
