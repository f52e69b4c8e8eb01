# tests/geo_matching/test_haversine_utils.py

import math

import pytest

from geo_matching.domain.entities import Coordinate, DeliveryRadiusPolicy
from geo_matching.domain.haversine_utils import (
    UNKNOWN_DISTANCE,
    distance_km,
    sort_by_distance,
    within_radius,
)

SAO_PAULO = Coordinate(-23.5505, -46.6333)
RIO = Coordinate(-22.9068, -43.1729)


def test_sao_paulo_rio_known_distance():
    assert 357 <= distance_km(SAO_PAULO, RIO) <= 362


def test_distance_is_symmetric():
    pares = [
        (SAO_PAULO, RIO),
        (Coordinate(-3.7319, -38.5267), Coordinate(-8.0476, -34.877)),
        (Coordinate(48.8566, 2.3522), Coordinate(-33.8688, 151.2093)),
    ]
    for a, b in pares:
        assert distance_km(a, b) == pytest.approx(distance_km(b, a))


def test_same_point_is_zero():
    assert distance_km(SAO_PAULO, SAO_PAULO) == pytest.approx(0.0)


def test_zero_coordinate_on_either_side_is_unknown():
    origem = Coordinate(0, 0)
    assert distance_km(SAO_PAULO, origem) == math.inf
    assert distance_km(origem, RIO) == math.inf

    # um único escalar zerado já basta
    assert distance_km(SAO_PAULO, Coordinate(-22.9, 0)) == math.inf
    assert distance_km(Coordinate(0, -43.1), RIO) == math.inf


def test_missing_or_non_finite_coordinate_is_unknown():
    assert distance_km(None, RIO) == UNKNOWN_DISTANCE
    assert distance_km(SAO_PAULO, None) == UNKNOWN_DISTANCE
    assert distance_km(SAO_PAULO, Coordinate(float("nan"), -43.1)) == UNKNOWN_DISTANCE


def test_within_radius_boundaries():
    assert within_radius(5.0, 5.0)
    assert not within_radius(5.01, 5.0)
    assert not within_radius(math.inf, 10_000)


def test_sort_by_distance_puts_unknown_last_and_is_stable():
    perto = {"nome": "perto", "coordinate": Coordinate(-23.56, -46.64)}
    longe = {"nome": "longe", "coordinate": RIO}
    sem_local_1 = {"nome": "sem_local_1", "coordinate": None}
    sem_local_2 = {"nome": "sem_local_2", "coordinate": Coordinate(0, 0)}

    ordenados = sort_by_distance(
        [sem_local_1, longe, sem_local_2, perto],
        SAO_PAULO,
        coordinate_of=lambda e: e["coordinate"],
    )

    assert [e["nome"] for e in ordenados] == ["perto", "longe", "sem_local_1", "sem_local_2"]


def test_delivery_radius_policy():
    policy = DeliveryRadiusPolicy(center=SAO_PAULO, radius_km=10)

    assert policy.reaches(Coordinate(-23.56, -46.64))
    assert not policy.reaches(RIO)
    assert not policy.reaches(None)

    sem_limite = DeliveryRadiusPolicy(center=None, radius_km=math.inf)
    assert not sem_limite.reaches(SAO_PAULO)

    with pytest.raises(ValueError):
        DeliveryRadiusPolicy(center=SAO_PAULO, radius_km=-1)
