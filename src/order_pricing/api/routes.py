#chegoou_engine/src/order_pricing/api/routes.py

# ============================================================
# 📦 order_pricing/api/routes.py: frete, totais e troco
# ============================================================

import math

from fastapi import APIRouter, HTTPException
from loguru import logger

from geo_matching.domain.haversine_utils import distance_km
from marketplace_api.api.json_sanitizer import clean
from marketplace_api.api.schemas import (
    DeliveryFeeRequest,
    PlaceOrderRequest,
    ProductPriceRequest,
    QuoteRequest,
)
from order_pricing.application.order_placement_use_case import Customer, OrderPlacementUseCase
from order_pricing.domain.delivery_fee import resolve_delivery_fee
from order_pricing.domain.exceptions import PricingValidationError
from order_pricing.domain.order_totals import compute_order_totals, validate_cash_change
from order_pricing.domain.product_pricing import build_cart_line

router = APIRouter()


# ============================================================
# 🚚 POST /pricing/delivery-fee
# ============================================================
@router.post("/delivery-fee")
def calcular_frete(payload: DeliveryFeeRequest):
    dist = distance_km(payload.customer.to_domain(), payload.restaurant.to_domain())

    # distância desconhecida → não pedível, frete escondido
    fee = None if math.isinf(dist) else resolve_delivery_fee(payload.pricing.to_domain(), dist)

    return clean({
        "distance_km": dist,
        "delivery_fee": fee,
        "orderable": fee is not None,
    })


# ============================================================
# 🧾 POST /pricing/quote
# ============================================================
@router.post("/quote")
def calcular_totais(payload: QuoteRequest):
    try:
        totals = compute_order_totals(
            [line.to_domain() for line in payload.cart],
            delivery_fee=payload.delivery_fee,
            service_fee_percent=payload.service_fee_percent,
            delivery_method=payload.delivery_method,
        )

        troco = None
        if payload.payment_method == "cash":
            troco = validate_cash_change(payload.change_for, totals.grand_total)

    except PricingValidationError as e:
        logger.warning(f"⚠️ Orçamento rejeitado: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    return {
        "subtotal": totals.subtotal,
        "effective_delivery_fee": totals.effective_delivery_fee,
        "service_fee_amount": totals.service_fee_amount,
        "grand_total": totals.grand_total,
        "change_for": troco,
    }


# ============================================================
# 🍕 POST /pricing/product-price
# ============================================================
@router.post("/product-price")
def calcular_preco_produto(payload: ProductPriceRequest):
    try:
        line = build_cart_line(payload.product.to_domain(), payload.selections, payload.quantity)
    except PricingValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return {
        "product_id": line.product_id,
        "unit_final_price": line.unit_final_price,
        "quantity": line.quantity,
    }


# ============================================================
# 🛒 POST /pricing/place-order
# ============================================================
@router.post("/place-order")
def validar_pedido(payload: PlaceOrderRequest):
    customer = Customer(
        id=payload.customer.id,
        name=payload.customer.name,
        phone=payload.customer.phone,
        coordinate=payload.customer.to_coordinate(),
    )
    use_case = OrderPlacementUseCase(payload.restaurant.to_domain())

    try:
        draft = use_case.executar(
            customer=customer,
            cart_lines=[line.to_domain() for line in payload.cart],
            delivery_method=payload.delivery_method,
            payment_method=payload.payment_method,
            change_for=payload.change_for,
        )
    except PricingValidationError as e:
        logger.warning(f"⚠️ Pedido recusado: {e}")
        raise HTTPException(status_code=422, detail=str(e))

    return clean({
        "company_id": draft.company_id,
        "customer_id": draft.customer_id,
        "status": draft.status,
        "delivery_method": draft.delivery_method,
        "payment_method": draft.payment_method,
        "delivery_type": draft.delivery_type,
        "delivery_code": draft.delivery_code,
        "distance_km": draft.distance_km,
        "change_for": draft.change_for,
        "subtotal": draft.totals.subtotal,
        "delivery_fee": draft.totals.effective_delivery_fee,
        "service_fee": draft.totals.service_fee_amount,
        "total": draft.totals.grand_total,
    })
