# storefront/services/product_client.py
from typing import Any, Dict, List

import requests
from requests import RequestException

from storefront.domain.errors import InvalidArgumentError, UpstreamError
from storefront.utils.settings import CATALOG_API_URL, CATALOG_TIMEOUT_SECONDS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

# lista produktow obcinana do pierwszych 10
PAGE_SIZE = 10


class ProductClient:
    """
    Katalog produktow z zewnetrznego API (bez lokalnej bazy).
    Bledy sieci i zle odpowiedzi zamieniane na UpstreamError, bez ponawiania.
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = (base_url or CATALOG_API_URL).rstrip("/")
        self.timeout = timeout or CATALOG_TIMEOUT_SECONDS

    def list_products(self) -> List[Dict[str, Any]]:
        products = self._get_json(self.base_url)

        if not isinstance(products, list):
            raise UpstreamError("Product catalog returned an unexpected payload")

        return products[:PAGE_SIZE]

    def get_product(self, product_id) -> Dict[str, Any]:
        if not product_id:
            raise InvalidArgumentError("Product Id Required")

        try:
            pid = int(product_id)
        except (TypeError, ValueError):
            raise InvalidArgumentError(f"Invalid product id: {product_id}")

        if not pid:
            raise InvalidArgumentError("Product Id Required")

        # body zwracane bez sprawdzania ksztaltu
        return self._get_json(f"{self.base_url}/{pid}")

    def _get_json(self, url: str):
        logger.info(f"ProductClient GET {url}")

        try:
            resp = requests.get(url, timeout=self.timeout)
            resp.raise_for_status()
            return resp.json()
        except RequestException as e:
            logger.error(f"Error while fetching products from {url}: {e}")
            raise UpstreamError(str(e)) from e
        except ValueError as e:
            logger.error(f"Unparseable catalog response from {url}: {e}")
            raise UpstreamError(f"Unparseable catalog response: {e}") from e
