# storefront/api/routers/health.py
import redis
from fastapi import APIRouter, Depends
from redis.exceptions import RedisError
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.data.database import get_db
from storefront.utils.settings import CELERY_BROKER_URL
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


def ping_broker() -> bool:
    try:
        client = redis.Redis.from_url(CELERY_BROKER_URL, socket_connect_timeout=1)
        return bool(client.ping())
    except (RedisError, ValueError) as e:
        logger.warning(f"Broker ping failed: {e}")
        return False


@router.get("/health")
def health(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.warning(f"Database ping failed: {e}")
        database = "unavailable"

    broker = "ok" if ping_broker() else "unavailable"
    status = "ok" if database == "ok" and broker == "ok" else "degraded"

    return {"status": status, "database": database, "broker": broker}
