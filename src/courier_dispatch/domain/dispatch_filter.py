# ============================================================
# 🛵 src/courier_dispatch/domain/dispatch_filter.py
# ============================================================

from typing import Iterable, List, Optional

from loguru import logger

from courier_dispatch.domain.entities import (
    DISCOVERABLE_STATUSES,
    DispatchableOrder,
    DispatchCandidate,
    RouteDistances,
)
from geo_matching.domain.entities import Coordinate
from geo_matching.domain.haversine_utils import distance_km, within_radius


def eligible_for_courier(
    orders: Iterable[DispatchableOrder],
    courier_position: Optional[Coordinate],
    operational_radius_km: float,
) -> List[DispatchCandidate]:
    """
    Pedidos disponíveis para o entregador, mais próximo (retirada) primeiro.

    - só entrega da plataforma (entrega própria do restaurante nunca aparece)
    - só status ready / waiting_courier ("delivering" é o pedido ativo de alguém)
    - distância até a retirada <= raio operacional (fronteira inclusiva)

    Retorna um snapshot novo; deve ser chamado de novo a cada posição/lista.
    """
    if courier_position is None:
        return []

    candidatos = []
    total = 0
    for order in orders:
        total += 1
        if order.delivery_type_tag != "platform":
            continue
        if order.status not in DISCOVERABLE_STATUSES:
            continue

        dist = distance_km(courier_position, order.pickup_coordinate)
        if not within_radius(dist, operational_radius_km):
            logger.debug(f"🚫 Pedido {order.id} fora do raio ({dist:.2f} km > {operational_radius_km} km)")
            continue

        candidatos.append(DispatchCandidate(order=order, pickup_distance_km=dist))

    candidatos.sort(key=lambda c: c.pickup_distance_km)

    logger.info(f"🛵 {len(candidatos)}/{total} pedido(s) elegíveis no raio de {operational_radius_km} km")
    return candidatos


# ============================================================
# 📍 Pedido ativo do entregador
# ============================================================
def find_active_order(
    orders: Iterable[DispatchableOrder],
    courier_id: Optional[str] = None,
) -> Optional[DispatchableOrder]:
    """Primeiro pedido da plataforma em entrega (opcionalmente do entregador informado)."""
    for order in orders:
        if order.status != "delivering" or order.delivery_type_tag != "platform":
            continue
        if courier_id is not None and order.courier_id != courier_id:
            continue
        return order
    return None


def active_route_distances(
    order: DispatchableOrder,
    courier_position: Optional[Coordinate],
) -> RouteDistances:
    return RouteDistances(
        to_pickup_km=distance_km(courier_position, order.pickup_coordinate),
        to_drop_km=distance_km(order.pickup_coordinate, order.delivery_coordinate),
    )
