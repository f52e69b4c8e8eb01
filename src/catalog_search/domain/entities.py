# ==========================================================
# 📦 src/catalog_search/domain/entities.py
# ==========================================================

from dataclasses import dataclass
from typing import Literal, Optional

from geo_matching.domain.entities import Coordinate, DeliveryRadiusPolicy
from order_pricing.domain.entities import PricingConfiguration


@dataclass(frozen=True)
class SearchableEntity:
    """Qualquer coisa buscável por texto livre (restaurante ou produto)."""
    display_name: str
    category: str = ""


@dataclass(frozen=True)
class Restaurant:
    id: str
    name: str
    category: str
    coordinate: Optional[Coordinate]
    delivery_radius_km: float
    pricing: PricingConfiguration
    status: Literal["open", "closed"] = "open"
    is_suspended: bool = False

    @property
    def searchable(self) -> SearchableEntity:
        return SearchableEntity(display_name=self.name, category=self.category)

    @property
    def radius_policy(self) -> DeliveryRadiusPolicy:
        return DeliveryRadiusPolicy(center=self.coordinate, radius_km=self.delivery_radius_km)


@dataclass(frozen=True)
class RestaurantListing:
    """
    Visão derivada de um restaurante para um cliente.
    delivery_fee é None quando a distância é desconhecida (não pedível).
    """
    restaurant: Restaurant
    distance_km: float
    delivery_fee: Optional[float]

    @property
    def orderable(self) -> bool:
        return self.delivery_fee is not None
