# storefront/services/notification_service.py
from typing import Any, Dict

from storefront.celery_worker import celery_app
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Serwis do wysylania potwierdzen zamowien (paragon).
    Uzywa Celery do asynchronicznego przetwarzania.
    """

    @staticmethod
    def send_order_receipt(receipt: Dict[str, Any]):
        """
        Kolejkuje paragon; wartosci musza byc serializowalne do JSON.
        """
        send_order_receipt_task.delay(
            {
                "order_id": receipt["order_id"],
                "customer_name": receipt["customer_name"],
                "customer_email": receipt["customer_email"],
                "total": str(receipt["total"]),
                "item_count": receipt["item_count"],
                "timestamp": receipt["timestamp"].isoformat(),
            }
        )


@celery_app.task(name="storefront.services.notification_service.send_order_receipt_task")
def send_order_receipt_task(receipt: Dict[str, Any]):
    """
    Celery task - w prawdziwym systemie wyslalby email z paragonem.
    Teraz tylko loguje.
    """
    logger.info(
        f"[RECEIPT] Order {receipt['order_id']} for {receipt['customer_name']} "
        f"<{receipt['customer_email']}>: {receipt['item_count']} item(s), total {receipt['total']}"
    )

    return {"order_id": receipt["order_id"], "status": "sent"}
