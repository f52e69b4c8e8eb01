# tests/marketplace_api/test_marketplace_api.py

import pytest
from fastapi.testclient import TestClient

from marketplace_api.api.marketplace_api import app

SAO_PAULO = {"latitude": -23.5505, "longitude": -46.6333}
PERTO = {"latitude": -23.5705, "longitude": -46.6333}


@pytest.fixture
def client():
    return TestClient(app)


def _restaurante(**kwargs):
    dados = {
        "id": "r1",
        "name": "Pizza Napoli",
        "category": "Pizza",
        "location": PERTO,
        "delivery_radius_km": 10,
        "pricing": {"delivery_type": "chegoou", "service_fee_percent": 10},
    }
    dados.update(kwargs)
    return dados


def test_health(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "online" in r.json()["status"]


def test_match(client):
    assert client.post("/catalog/match", json={"source_text": "Pizza Hut", "query": "pizza"}).json() == {"match": True}
    assert client.post("/catalog/match", json={"source_text": "Sushi", "query": "Sashe"}).json() == {"match": False}


def test_quote_service_fee_on_subtotal(client):
    r = client.post("/pricing/quote", json={
        "cart": [{"unit_final_price": 50, "quantity": 2}],
        "delivery_fee": 10,
        "service_fee_percent": 10,
    })

    assert r.status_code == 200
    body = r.json()
    assert body["service_fee_amount"] == pytest.approx(10)
    assert body["grand_total"] == pytest.approx(120)


def test_quote_rejects_insufficient_cash_change(client):
    r = client.post("/pricing/quote", json={
        "cart": [{"unit_final_price": 100}],
        "delivery_fee": 10,
        "service_fee_percent": 10,
        "payment_method": "cash",
        "change_for": 119.99,
    })
    assert r.status_code == 422
    assert "Troco" in r.json()["detail"]


def test_delivery_fee_unknown_location_is_hidden(client):
    r = client.post("/pricing/delivery-fee", json={
        "pricing": {"delivery_type": "platform"},
        "customer": SAO_PAULO,
        "restaurant": {"latitude": 0, "longitude": 0},
    })

    assert r.status_code == 200
    assert r.json() == {"distance_km": None, "delivery_fee": None, "orderable": False}


def test_delivery_fee_platform_override(client):
    r = client.post("/pricing/delivery-fee", json={
        "pricing": {"delivery_type": "platform", "platform_override_fee": 8},
        "customer": SAO_PAULO,
        "restaurant": PERTO,
    })
    assert r.json()["delivery_fee"] == 8


def test_catalog_listing(client):
    r = client.post("/catalog/restaurants", json={
        "customer": SAO_PAULO,
        "restaurants": [
            _restaurante(),
            _restaurante(id="r2", name="Sem Endereço", location={"latitude": 0, "longitude": 0}),
        ],
        "search_term": "napoly",
    })

    assert r.status_code == 200
    body = r.json()
    assert [item["id"] for item in body] == ["r1"]
    assert body[0]["orderable"] is True


def test_product_price(client):
    r = client.post("/pricing/product-price", json={
        "product": {
            "id": "pz",
            "company_id": "r1",
            "name": "Pizza",
            "pricing_mode": "highest",
            "groups": [{
                "id": "sabores",
                "name": "Sabores",
                "min": 1,
                "max": 2,
                "options": [
                    {"id": "a", "name": "Mussarela", "price": 40},
                    {"id": "b", "name": "Camarão", "price": 60},
                ],
            }],
        },
        "selections": {"sabores": ["a", "b"]},
    })
    assert r.json()["unit_final_price"] == pytest.approx(60)


def test_place_order(client):
    r = client.post("/pricing/place-order", json={
        "restaurant": _restaurante(),
        "customer": {"id": "c1", "name": "Maria", "phone": "11987654321", "location": SAO_PAULO},
        "cart": [{"unit_final_price": 50, "quantity": 2}],
        "delivery_method": "pickup",
        "payment_method": "cash",
        "change_for": 110,
    })

    assert r.status_code == 200
    body = r.json()
    assert body["delivery_code"] == "4321"
    assert body["total"] == pytest.approx(110)
    assert body["delivery_type"] == "platform"


def test_place_order_out_of_area(client):
    r = client.post("/pricing/place-order", json={
        "restaurant": _restaurante(delivery_radius_km=1),
        "customer": {"id": "c1", "location": SAO_PAULO},
        "cart": [{"unit_final_price": 50}],
    })
    assert r.status_code == 422


def test_dispatch_orders(client):
    r = client.post("/dispatch/orders", json={
        "courier": SAO_PAULO,
        "orders": [
            {"id": "a", "pickup": PERTO, "status": "ready", "delivery_type": "chegoou"},
            {"id": "b", "pickup": PERTO, "status": "ready", "delivery_type": "own"},
            {"id": "c", "pickup": PERTO, "status": "delivering", "delivery_type": "platform"},
        ],
    })

    body = r.json()
    assert body["operational_radius_km"] == 15
    assert [o["order_id"] for o in body["orders"]] == ["a"]


def test_dispatch_active_and_confirm(client):
    pedido = {
        "id": "c",
        "pickup": PERTO,
        "status": "delivering",
        "delivery_type": "platform",
        "delivery_code": "4321",
    }

    ativo = client.post("/dispatch/active", json={"courier": SAO_PAULO, "orders": [pedido]}).json()
    assert ativo["order"]["order_id"] == "c"
    assert ativo["order"]["to_drop_km"] is None

    assert client.post("/dispatch/confirm", json={"order": pedido, "code": "0000"}).status_code == 422

    ok = client.post("/dispatch/confirm", json={"order": pedido, "code": "4321"})
    assert ok.json() == {"order_id": "c", "status": "delivered"}


def test_quote_rejects_nan_cash_change(client):
    corpo = (
        '{"cart": [{"unit_final_price": 100}], "delivery_fee": 10, "service_fee_percent": 10,'
        ' "payment_method": "cash", "change_for": NaN}'
    )
    r = client.post("/pricing/quote", content=corpo, headers={"Content-Type": "application/json"})
    assert r.status_code == 422


def test_catalog_rejects_infinite_delivery_radius(client):
    corpo = (
        '{"customer": {"latitude": -23.5505, "longitude": -46.6333}, "restaurants": [{'
        '"id": "r9", "name": "Raio Infinito", "delivery_radius_km": Infinity,'
        ' "pricing": {"delivery_type": "own"}}], "special_filter": "free"}'
    )
    r = client.post("/catalog/restaurants", content=corpo, headers={"Content-Type": "application/json"})
    assert r.status_code == 422


def test_place_order_uses_coordinates_from_address_row(client):
    r = client.post("/pricing/place-order", json={
        "restaurant": _restaurante(location=None, address={"street": "Rua Vergueiro", "lat": -23.5705, "lng": -46.6333}),
        "customer": {
            "id": "c1",
            "phone": "11987654321",
            "address": {"street": "Av. Paulista", "zipCode": "01310-100", "lat": -23.5505, "lng": -46.6333},
        },
        "cart": [{"unit_final_price": 50}],
    })

    assert r.status_code == 200
    assert r.json()["distance_km"] == pytest.approx(2.22, abs=0.01)


def test_geo_address_from_cep(client):
    r = client.post("/geo/address-from-cep", json={
        "viacep": {"cep": "01310-100", "logradouro": "Avenida Paulista", "bairro": "Bela Vista", "localidade": "São Paulo"},
        "number": "1000",
    })

    assert r.status_code == 200
    body = r.json()
    assert body["address"]["zip_code"] == "01310100"
    assert body["geocoding_query"] == "Avenida Paulista, 1000, Bela Vista, São Paulo, Brasil"

    assert client.post("/geo/address-from-cep", json={"viacep": {"erro": True}}).status_code == 404
    assert client.post("/geo/address-from-cep", json={"viacep": {"cep": "123"}}).status_code == 422


def test_geo_coordinate_falls_back_to_geocoder(client):
    geocoder = {
        "status": "OK",
        "results": [{"geometry": {"location": {"lat": -23.5614, "lng": -46.6559}}}],
    }

    r = client.post("/geo/coordinate", json={"address": {"street": "Av. Paulista", "city": "São Paulo"}, "geocoder": geocoder})
    assert r.json()["coordinate"] == {"latitude": -23.5614, "longitude": -46.6559}

    sem = client.post("/geo/coordinate", json={"address": {"street": "Av. Paulista"}})
    assert sem.json() == {"coordinate": None, "geocoding_query": "Av. Paulista, Brasil"}
