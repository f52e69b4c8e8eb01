# ============================================================
# 📦 src/order_pricing/domain/order_totals.py
# ============================================================

import math
from typing import Iterable, List, Optional

from order_pricing.domain.entities import CartLine, DeliveryMethod, OrderTotals
from order_pricing.domain.exceptions import InvalidCartLineError, InvalidCashChangeError


# ============================================================
# 🔍 Validação das linhas do carrinho
# ============================================================
def validate_cart_lines(cart_lines: Iterable[CartLine]) -> List[CartLine]:
    linhas = list(cart_lines)
    for idx, line in enumerate(linhas):
        if line.unit_final_price < 0:
            raise InvalidCartLineError(
                f"Item {idx + 1}: preço negativo ({line.unit_final_price})."
            )
        if line.quantity < 1:
            raise InvalidCartLineError(
                f"Item {idx + 1}: quantidade deve ser >= 1 ({line.quantity})."
            )
    return linhas


def subtotal_of(cart_lines: Iterable[CartLine]) -> float:
    return sum(line.unit_final_price * line.quantity for line in cart_lines)


# ============================================================
# 💰 Totais do pedido
# ============================================================
def compute_order_totals(
    cart_lines: Iterable[CartLine],
    delivery_fee: float,
    service_fee_percent: float,
    delivery_method: DeliveryMethod = "delivery",
) -> OrderTotals:
    """
    subtotal = soma(preço final unitário * quantidade)
    taxa de serviço = subtotal * percentual / 100 (NUNCA sobre o frete)
    retirada (pickup) zera o frete.
    """
    linhas = validate_cart_lines(cart_lines)

    if not math.isfinite(delivery_fee) or not math.isfinite(service_fee_percent):
        raise InvalidCartLineError("Frete e taxa de serviço precisam ser valores numéricos válidos.")
    if delivery_fee < 0 or service_fee_percent < 0:
        raise InvalidCartLineError("Frete e taxa de serviço não podem ser negativos.")

    subtotal = subtotal_of(linhas)
    effective_delivery_fee = 0.0 if delivery_method == "pickup" else delivery_fee
    service_fee_amount = subtotal * (service_fee_percent / 100)

    return OrderTotals(
        subtotal=subtotal,
        effective_delivery_fee=effective_delivery_fee,
        service_fee_amount=service_fee_amount,
        grand_total=subtotal + effective_delivery_fee + service_fee_amount,
    )


# ============================================================
# 💵 Troco (pagamento em dinheiro)
# ============================================================
def validate_cash_change(change_for: Optional[float], grand_total: float) -> float:
    """
    Troco para pagamento em dinheiro: precisa ser >= total do pedido.
    Nunca ajusta o valor silenciosamente.
    """
    if change_for is None:
        raise InvalidCashChangeError("Informe o valor para troco no pagamento em dinheiro.")

    if not math.isfinite(change_for):
        raise InvalidCashChangeError(f"Valor para troco inválido: {change_for}.")

    if change_for < grand_total:
        raise InvalidCashChangeError(
            f"Troco deve ser maior que o total (R$ {change_for:.2f} < R$ {grand_total:.2f})."
        )

    return change_for


# ============================================================
# ✏️ Pedido editado pelo restaurante
# ============================================================
def recalculate_edited_order(
    cart_lines: Iterable[CartLine],
    delivery_fee: float,
    service_fee_amount: float,
) -> OrderTotals:
    """
    Recalcula subtotal e total após edição dos itens.
    Frete e taxa de serviço gravados no pedido são mantidos como estão.
    """
    linhas = validate_cart_lines(cart_lines)
    subtotal = subtotal_of(linhas)
    return OrderTotals(
        subtotal=subtotal,
        effective_delivery_fee=delivery_fee,
        service_fee_amount=service_fee_amount,
        grand_total=subtotal + delivery_fee + service_fee_amount,
    )
