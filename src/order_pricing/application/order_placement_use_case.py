# ============================================================
# 📦 src/order_pricing/application/order_placement_use_case.py
# ============================================================

import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from loguru import logger

from catalog_search.domain.entities import Restaurant
from courier_dispatch.domain.delivery_confirmation import delivery_code_from_phone
from geo_matching.domain.entities import Coordinate
from geo_matching.domain.haversine_utils import distance_km, within_radius
from order_pricing.domain.delivery_fee import resolve_delivery_fee
from order_pricing.domain.entities import (
    CartLine,
    DeliveryMethod,
    DeliveryType,
    OrderTotals,
    PaymentMethod,
)
from order_pricing.domain.exceptions import (
    EmptyCartError,
    OutOfDeliveryAreaError,
    RestaurantUnavailableError,
)
from order_pricing.domain.order_totals import compute_order_totals, validate_cash_change


@dataclass(frozen=True)
class Customer:
    id: str
    name: str
    phone: str
    coordinate: Optional[Coordinate]


@dataclass(frozen=True)
class OrderDraft:
    """Pedido validado, pronto para ser gravado pelo cliente do banco externo."""
    company_id: str
    company_name: str
    customer_id: str
    items: List[CartLine]
    totals: OrderTotals
    delivery_method: DeliveryMethod
    payment_method: PaymentMethod
    delivery_type: DeliveryType
    delivery_code: str
    pickup_coordinate: Optional[Coordinate]
    delivery_coordinate: Optional[Coordinate]
    change_for: Optional[float] = None
    distance_km: float = field(default=math.inf)
    status: str = "pending"


class OrderPlacementUseCase:
    """
    Valida e precifica um pedido antes do pagamento/gravação:
    - restaurante disponível (não suspenso)
    - carrinho não vazio
    - cliente dentro do raio (somente delivery)
    - totais com taxa de serviço sobre o subtotal
    - troco válido para pagamento em dinheiro
    """

    def __init__(self, restaurant: Optional[Restaurant]):
        self.restaurant = restaurant

    def executar(
        self,
        customer: Customer,
        cart_lines: Iterable[CartLine],
        delivery_method: DeliveryMethod = "delivery",
        payment_method: PaymentMethod = "card",
        change_for: Optional[float] = None,
    ) -> OrderDraft:

        restaurant = self.restaurant
        if restaurant is None:
            raise RestaurantUnavailableError("Restaurante não encontrado.")
        if restaurant.is_suspended:
            raise RestaurantUnavailableError("Este estabelecimento está temporariamente indisponível.")

        linhas = list(cart_lines)
        if not linhas:
            raise EmptyCartError("Carrinho vazio.")

        dist = distance_km(customer.coordinate, restaurant.coordinate)

        if delivery_method == "delivery":
            if math.isinf(dist):
                raise OutOfDeliveryAreaError(
                    "Não foi possível calcular a distância até o restaurante. Verifique o endereço."
                )
            if not within_radius(dist, restaurant.delivery_radius_km):
                raise OutOfDeliveryAreaError(
                    f"Você está fora da área de entrega deste restaurante "
                    f"({dist:.1f}km > {restaurant.delivery_radius_km}km)."
                )
            delivery_fee = resolve_delivery_fee(restaurant.pricing, dist)
        else:
            delivery_fee = 0.0

        totals = compute_order_totals(
            linhas,
            delivery_fee=delivery_fee,
            service_fee_percent=restaurant.pricing.service_fee_percent,
            delivery_method=delivery_method,
        )

        troco = None
        if payment_method == "cash":
            troco = validate_cash_change(change_for, totals.grand_total)

        logger.info(
            f"🧾 Pedido validado | {restaurant.name} | subtotal R$ {totals.subtotal:.2f} "
            f"| frete R$ {totals.effective_delivery_fee:.2f} | taxa R$ {totals.service_fee_amount:.2f} "
            f"| total R$ {totals.grand_total:.2f} ({payment_method})"
        )

        return OrderDraft(
            company_id=restaurant.id,
            company_name=restaurant.name,
            customer_id=customer.id,
            items=linhas,
            totals=totals,
            delivery_method=delivery_method,
            payment_method=payment_method,
            delivery_type=restaurant.pricing.delivery_type,
            delivery_code=delivery_code_from_phone(customer.phone),
            pickup_coordinate=restaurant.coordinate,
            delivery_coordinate=customer.coordinate,
            change_for=troco,
            distance_km=dist,
        )
