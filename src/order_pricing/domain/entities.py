# ==========================================================
# 📦 src/order_pricing/domain/entities.py
# ==========================================================

from dataclasses import dataclass, field
from typing import List, Literal, Optional

DeliveryType = Literal["own", "platform"]
DeliveryMethod = Literal["delivery", "pickup"]
PaymentMethod = Literal["cash", "card", "pix"]
PricingMode = Literal["default", "average", "highest"]


@dataclass(frozen=True)
class PricingConfiguration:
    """
    Configuração de frete/taxa de um restaurante.
    - own: frete fixo do próprio restaurante (own_flat_fee)
    - platform: taxa fixa do admin (platform_override_fee) ou base + km
    Campos None caem nos padrões de config.settings.
    """
    delivery_type: DeliveryType
    own_flat_fee: Optional[float] = None
    platform_override_fee: Optional[float] = None
    base_fee: Optional[float] = None
    per_km_fee: Optional[float] = None
    service_fee_percent: float = 0.0


@dataclass(frozen=True)
class CartLine:
    """unit_final_price já inclui adicionais/opções escolhidas."""
    unit_final_price: float
    quantity: int = 1
    product_id: Optional[str] = None
    product_name: Optional[str] = None


@dataclass(frozen=True)
class OrderTotals:
    subtotal: float
    effective_delivery_fee: float
    service_fee_amount: float
    grand_total: float


# ==========================================================
# 🍕 Produto com grupos de opções (tamanho, sabores, adicionais)
# ==========================================================
@dataclass(frozen=True)
class ProductOption:
    id: str
    name: str
    price: float
    is_available: bool = True


@dataclass(frozen=True)
class ProductGroup:
    id: str
    name: str
    min: int = 0
    max: int = 1
    options: List[ProductOption] = field(default_factory=list)


@dataclass(frozen=True)
class Product:
    id: str
    company_id: str
    name: str
    price: float
    category: str = ""
    is_available: bool = True
    pricing_mode: PricingMode = "default"
    groups: List[ProductGroup] = field(default_factory=list)
