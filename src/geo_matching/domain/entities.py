# ==========================================================
# 📦 src/geo_matching/domain/entities.py
# ==========================================================

import math
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Coordinate:
    """Par latitude/longitude em graus decimais."""
    latitude: float
    longitude: float

    def as_tuple(self):
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class DeliveryRadiusPolicy:
    """
    Área de entrega de um restaurante.
    Um ponto é "alcançável" se a distância ao centro for <= radius_km.
    """
    center: Optional[Coordinate]
    radius_km: float

    def __post_init__(self):
        if self.radius_km < 0:
            raise ValueError(f"❌ radius_km inválido: {self.radius_km}")

    def reaches(self, coordinate: Optional[Coordinate]) -> bool:
        # import local para evitar ciclo entities <-> haversine_utils
        from geo_matching.domain.haversine_utils import distance_km, within_radius

        dist = distance_km(self.center, coordinate)
        if dist == math.inf:
            return False
        return within_radius(dist, self.radius_km)
