# tests/catalog_search/test_run_catalog_search.py

import json

import pytest

from catalog_search.cli.run_catalog_search import main


@pytest.fixture
def snapshot(tmp_path):
    dados = {
        "restaurants": [
            {
                "id": "r1",
                "name": "Pizza Napoli",
                "category": "Pizza",
                "location": {"latitude": -23.5705, "longitude": -46.6333},
                "delivery_radius_km": 10,
                "pricing": {"delivery_type": "chegoou"},
            },
            {
                "id": "r2",
                "name": "Sabor Caseiro",
                "category": "Brasileira",
                "address": {"street": "Rua Augusta", "zipCode": "01305-000", "lat": -23.5525, "lng": -46.6333},
                "delivery_radius_km": 10,
                "pricing": {"delivery_type": "own", "own_flat_fee": 0},
            },
            {
                "id": "r3",
                "name": "Sem Endereço",
                "category": "Lanches",
                "delivery_radius_km": 10,
                "pricing": {"delivery_type": "own"},
            },
        ],
        "products": [
            {"id": "p1", "company_id": "r2", "name": "Feijoada Completa", "price": 45},
        ],
    }
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(dados), encoding="utf-8")
    return path


def _ids(listings):
    return [l.restaurant.id for l in listings]


def test_cli_lists_reachable_restaurants_closest_first(snapshot):
    listings = main(["--snapshot", str(snapshot), "--lat", "-23.5505", "--lon", "-46.6333"])

    assert _ids(listings) == ["r2", "r1"]
    assert listings[0].delivery_fee == 0


def test_cli_search_and_filters(snapshot):
    base = ["--snapshot", str(snapshot), "--lat", "-23.5505", "--lon", "-46.6333"]

    assert _ids(main(base + ["--busca", "feijuada"])) == ["r2"]
    assert _ids(main(base + ["--categoria", "Pizza"])) == ["r1"]
    assert _ids(main(base + ["--filtro", "free"])) == ["r2"]


def test_cli_missing_snapshot_exits(tmp_path):
    with pytest.raises(SystemExit):
        main(["--snapshot", str(tmp_path / "nao_existe.json"), "--lat", "-23.5", "--lon", "-46.6"])
