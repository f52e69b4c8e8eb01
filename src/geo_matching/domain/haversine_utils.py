# ============================================================
# 📦 src/geo_matching/domain/haversine_utils.py
# ============================================================

import math
from typing import Callable, Iterable, List, Optional, TypeVar

from config.settings import EARTH_RADIUS_KM
from geo_matching.domain.entities import Coordinate

T = TypeVar("T")

# Sentinela de "distância desconhecida" (coordenada ausente ou zerada)
UNKNOWN_DISTANCE = math.inf


def _coordenada_ausente(valor) -> bool:
    if not valor:
        return True
    try:
        return not math.isfinite(float(valor))
    except (TypeError, ValueError):
        return True


def distance_km(a: Optional[Coordinate], b: Optional[Coordinate]) -> float:
    """
    Calcula a distância entre dois pontos em quilômetros (Haversine).
    Se qualquer coordenada vier ausente ou zerada retorna UNKNOWN_DISTANCE,
    nunca uma distância falsa até (0, 0).
    """
    if a is None or b is None:
        return UNKNOWN_DISTANCE

    lat1, lon1 = a.latitude, a.longitude
    lat2, lon2 = b.latitude, b.longitude

    if any(_coordenada_ausente(v) for v in (lat1, lon1, lat2, lon2)):
        return UNKNOWN_DISTANCE

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)

    h = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_KM * c


def within_radius(distance: float, radius_km: float) -> bool:
    """Fronteira inclusiva. Distância infinita nunca está dentro de um raio finito."""
    return distance <= radius_km


def sort_by_distance(
    entities: Iterable[T],
    reference: Optional[Coordinate],
    coordinate_of: Callable[[T], Optional[Coordinate]] = lambda e: e.coordinate,
) -> List[T]:
    """
    Ordenação estável, mais próximo primeiro.
    Entidades sem coordenada (distância infinita) ficam no fim.
    """
    return sorted(entities, key=lambda e: distance_km(reference, coordinate_of(e)))
