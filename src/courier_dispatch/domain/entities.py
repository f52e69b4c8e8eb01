# ==========================================================
# 📦 src/courier_dispatch/domain/entities.py
# ==========================================================

from dataclasses import dataclass
from typing import Literal, Optional

from geo_matching.domain.entities import Coordinate

OrderStatus = Literal[
    "pending",
    "preparing",
    "ready",
    "waiting_courier",
    "delivering",
    "delivered",
    "cancelled",
]

DeliveryTypeTag = Literal["own", "platform"]

# Status que aparecem na lista de descoberta do entregador
DISCOVERABLE_STATUSES = frozenset({"ready", "waiting_courier"})


@dataclass(frozen=True)
class DispatchableOrder:
    """Pedido como o entregador enxerga (snapshot do banco externo)."""
    id: str
    pickup_coordinate: Optional[Coordinate]
    status: OrderStatus
    delivery_type_tag: DeliveryTypeTag
    delivery_coordinate: Optional[Coordinate] = None
    courier_id: Optional[str] = None
    delivery_code: Optional[str] = None
    delivery_fee: float = 0.0
    company_name: str = ""


@dataclass(frozen=True)
class DispatchCandidate:
    order: DispatchableOrder
    pickup_distance_km: float


@dataclass(frozen=True)
class RouteDistances:
    """Trechos da entrega ativa. Trecho desconhecido = infinito."""
    to_pickup_km: float
    to_drop_km: float

    @property
    def total_km(self) -> float:
        return self.to_pickup_km + self.to_drop_km
