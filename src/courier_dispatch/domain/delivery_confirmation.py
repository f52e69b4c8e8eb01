#chegoou_engine/src/courier_dispatch/domain/delivery_confirmation.py

import re
from dataclasses import replace
from typing import Optional

from loguru import logger

from courier_dispatch.domain.entities import DispatchableOrder
from courier_dispatch.domain.exceptions import InvalidDeliveryCodeError, OrderNotDeliveringError

DEFAULT_DELIVERY_CODE = "0000"


def delivery_code_from_phone(phone: Optional[str]) -> str:
    """Código secreto da entrega: 4 últimos dígitos do celular do cliente."""
    digitos = re.sub(r"[^0-9]", "", phone or "")
    return digitos[-4:] if digitos else DEFAULT_DELIVERY_CODE


def confirm_delivery(order: DispatchableOrder, code: str) -> DispatchableOrder:
    if order.status != "delivering":
        raise OrderNotDeliveringError(f"Pedido {order.id} não está em entrega (status={order.status}).")

    if (code or "").strip() != (order.delivery_code or DEFAULT_DELIVERY_CODE):
        logger.warning(f"⚠️ Código incorreto para o pedido {order.id}")
        raise InvalidDeliveryCodeError(
            "Código incorreto! Peça os 4 últimos dígitos do celular do cliente."
        )

    logger.success(f"✅ Entrega do pedido {order.id} confirmada.")
    return replace(order, status="delivered")
