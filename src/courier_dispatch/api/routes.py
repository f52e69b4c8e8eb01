#chegoou_engine/src/courier_dispatch/api/routes.py

# ============================================================
# 📦 courier_dispatch/api/routes.py: lista do entregador
# ============================================================

from fastapi import APIRouter, HTTPException
from loguru import logger

from config.settings import COURIER_OPERATIONAL_RADIUS_KM
from courier_dispatch.domain.delivery_confirmation import confirm_delivery
from courier_dispatch.domain.dispatch_filter import (
    active_route_distances,
    eligible_for_courier,
    find_active_order,
)
from courier_dispatch.domain.exceptions import DispatchError
from marketplace_api.api.json_sanitizer import clean
from marketplace_api.api.schemas import ConfirmDeliveryRequest, DispatchRequest

router = APIRouter()


# ============================================================
# 🛵 POST /dispatch/orders
# ============================================================
@router.post("/orders")
def listar_pedidos_disponiveis(payload: DispatchRequest):
    radius = (
        payload.operational_radius_km
        if payload.operational_radius_km is not None
        else COURIER_OPERATIONAL_RADIUS_KM
    )
    courier = payload.courier.to_domain() if payload.courier else None
    orders = [o.to_domain() for o in payload.orders]

    candidatos = eligible_for_courier(orders, courier, radius)

    return clean({
        "operational_radius_km": radius,
        "orders": [
            {
                "order_id": c.order.id,
                "company_name": c.order.company_name,
                "status": c.order.status,
                "pickup_distance_km": c.pickup_distance_km,
                "delivery_fee": c.order.delivery_fee,
            }
            for c in candidatos
        ],
    })


# ============================================================
# 📍 POST /dispatch/active
# ============================================================
@router.post("/active")
def pedido_ativo(payload: DispatchRequest, courier_id: str | None = None):
    orders = [o.to_domain() for o in payload.orders]
    ativo = find_active_order(orders, courier_id=courier_id)

    if ativo is None:
        return {"order": None}

    courier = payload.courier.to_domain() if payload.courier else None
    trechos = active_route_distances(ativo, courier)

    return clean({
        "order": {
            "order_id": ativo.id,
            "company_name": ativo.company_name,
            "to_pickup_km": trechos.to_pickup_km,
            "to_drop_km": trechos.to_drop_km,
            "total_km": trechos.total_km,
        }
    })


# ============================================================
# ✅ POST /dispatch/confirm
# ============================================================
@router.post("/confirm")
def confirmar_entrega(payload: ConfirmDeliveryRequest):
    try:
        entregue = confirm_delivery(payload.order.to_domain(), payload.code)
    except DispatchError as e:
        logger.warning(f"⚠️ Confirmação recusada: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    return {"order_id": entregue.id, "status": entregue.status}
