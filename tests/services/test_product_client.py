"""Catalog gateway over requests, with requests.get replaced per test."""

import pytest
import requests

from storefront.domain.errors import InvalidArgumentError, UpstreamError, ValidationError
from storefront.services import product_client as client_module
from storefront.services.product_client import PAGE_SIZE, ProductClient

BASE_URL = "http://catalog.test/products"


class FakeResponse:
    def __init__(self, payload=None, status_code=200, body_error=None):
        self.payload = payload
        self.status_code = status_code
        self.body_error = body_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self.body_error:
            raise self.body_error
        return self.payload


def _product(pid):
    return {
        "id": pid,
        "title": f"Product {pid}",
        "price": 1.5 * pid,
        "description": "",
        "category": "misc",
        "image": f"https://example.com/{pid}.jpg",
        "rating": {"rate": 4.0, "count": 10},
    }


@pytest.fixture()
def calls(monkeypatch):
    """Lista wywolan requests.get; odpowiedz ustawiana przez calls.response."""

    class Recorder(list):
        response = FakeResponse([])

    recorder = Recorder()

    def fake_get(url, timeout=None):
        recorder.append((url, timeout))
        if isinstance(recorder.response, Exception):
            raise recorder.response
        return recorder.response

    monkeypatch.setattr(client_module.requests, "get", fake_get)
    return recorder


@pytest.fixture()
def client():
    return ProductClient(base_url=BASE_URL + "/", timeout=3)


class TestListProducts:
    def test_truncates_to_page_size(self, client, calls):
        calls.response = FakeResponse([_product(i) for i in range(1, 16)])

        products = client.list_products()

        assert len(products) == PAGE_SIZE == 10
        assert products[0]["id"] == 1
        assert calls == [(BASE_URL, 3)]

    def test_short_listing_is_returned_whole(self, client, calls):
        calls.response = FakeResponse([_product(1), _product(2)])

        assert [p["id"] for p in client.list_products()] == [1, 2]

    def test_network_failure_is_upstream_error(self, client, calls):
        calls.response = requests.ConnectionError("connection refused")

        with pytest.raises(UpstreamError):
            client.list_products()

        assert len(calls) == 1

    def test_http_error_is_upstream_error(self, client, calls):
        calls.response = FakeResponse(status_code=503)

        with pytest.raises(UpstreamError):
            client.list_products()

    def test_unparseable_body_is_upstream_error(self, client, calls):
        calls.response = FakeResponse(body_error=ValueError("Expecting value"))

        with pytest.raises(UpstreamError):
            client.list_products()

    def test_non_list_body_is_upstream_error(self, client, calls):
        calls.response = FakeResponse({"error": "nope"})

        with pytest.raises(UpstreamError):
            client.list_products()


class TestGetProduct:
    def test_returns_body_verbatim(self, client, calls):
        calls.response = FakeResponse(_product(5))

        product = client.get_product(5)

        assert product == _product(5)
        assert calls == [(f"{BASE_URL}/5", 3)]

    def test_accepts_string_id(self, client, calls):
        calls.response = FakeResponse(_product(7))

        client.get_product("7")

        assert calls[0][0] == f"{BASE_URL}/7"

    @pytest.mark.parametrize("product_id", [None, 0, "", "0", "abc"])
    def test_invalid_id_fails_before_any_call(self, client, calls, product_id):
        with pytest.raises(InvalidArgumentError):
            client.get_product(product_id)

        assert calls == []

    def test_invalid_argument_is_a_validation_error(self):
        assert issubclass(InvalidArgumentError, ValidationError)

    def test_missing_product_is_upstream_error(self, client, calls):
        calls.response = FakeResponse(status_code=404)

        with pytest.raises(UpstreamError):
            client.get_product(999)
