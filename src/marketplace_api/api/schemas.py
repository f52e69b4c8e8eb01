#chegoou_engine/src/marketplace_api/api/schemas.py

# ============================================================
# 📐 Schemas de entrada/saída da API
# ============================================================
# Payloads externos são validados aqui e convertidos para as
# dataclasses de domínio antes de qualquer cálculo.
# ============================================================

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from catalog_search.domain.entities import Restaurant
from courier_dispatch.domain.entities import DispatchableOrder
from geo_matching.domain.entities import Coordinate
from geo_matching.domain.geocoding_payloads import (
    AddressPayload,
    GeocoderResponse,
    ViaCepResponse,
)
from order_pricing.domain.entities import (
    CartLine,
    PricingConfiguration,
    Product,
    ProductGroup,
    ProductOption,
)

# "chegoou" é o nome da entrega da plataforma nas linhas do banco
_DELIVERY_TYPE_ALIASES = {"chegoou": "platform"}


def _normalizar_delivery_type(valor: str) -> str:
    return _DELIVERY_TYPE_ALIASES.get(valor, valor)


# ============================================================
# 🌍 Geografia
# ============================================================
class CoordinateSchema(BaseModel):
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    def to_domain(self) -> Optional[Coordinate]:
        if self.latitude is None or self.longitude is None:
            return None
        return Coordinate(latitude=self.latitude, longitude=self.longitude)


def _coord(schema: Optional[CoordinateSchema]) -> Optional[Coordinate]:
    return schema.to_domain() if schema else None


def _coord_ou_endereco(
    location: Optional[CoordinateSchema],
    address: Optional[AddressPayload],
) -> Optional[Coordinate]:
    # linhas do banco trazem lat/lng dentro do endereço
    coord = _coord(location)
    if coord is None and address is not None:
        coord = address.to_coordinate()
    return coord


class AddressFromCepRequest(BaseModel):
    viacep: ViaCepResponse
    number: str = ""


class ResolveCoordinateRequest(BaseModel):
    address: AddressPayload
    geocoder: Optional[GeocoderResponse] = None


# ============================================================
# 💰 Precificação
# ============================================================
class PricingConfigurationSchema(BaseModel):
    delivery_type: Literal["own", "platform"]
    own_flat_fee: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    platform_override_fee: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    base_fee: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    per_km_fee: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    service_fee_percent: float = Field(default=0.0, ge=0, allow_inf_nan=False)

    @field_validator("delivery_type", mode="before")
    @classmethod
    def alias_delivery_type(cls, v):
        return _normalizar_delivery_type(v)

    def to_domain(self) -> PricingConfiguration:
        return PricingConfiguration(**self.model_dump())


class CartLineSchema(BaseModel):
    unit_final_price: float = Field(ge=0, allow_inf_nan=False)
    quantity: int = Field(default=1, ge=1)
    product_id: Optional[str] = None
    product_name: Optional[str] = None

    def to_domain(self) -> CartLine:
        return CartLine(**self.model_dump())


class DeliveryFeeRequest(BaseModel):
    pricing: PricingConfigurationSchema
    customer: CoordinateSchema
    restaurant: CoordinateSchema


class QuoteRequest(BaseModel):
    cart: List[CartLineSchema]
    delivery_fee: float = Field(ge=0, allow_inf_nan=False)
    service_fee_percent: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    delivery_method: Literal["delivery", "pickup"] = "delivery"
    payment_method: Literal["cash", "card", "pix"] = "card"
    change_for: Optional[float] = Field(default=None, allow_inf_nan=False)


# ============================================================
# 🏪 Catálogo
# ============================================================
class RestaurantSchema(BaseModel):
    id: str
    name: str
    category: str = ""
    location: Optional[CoordinateSchema] = None
    address: Optional[AddressPayload] = None
    delivery_radius_km: float = Field(ge=0, allow_inf_nan=False)
    pricing: PricingConfigurationSchema
    status: Literal["open", "closed"] = "open"
    is_suspended: bool = False

    def to_domain(self) -> Restaurant:
        return Restaurant(
            id=self.id,
            name=self.name,
            category=self.category,
            coordinate=_coord_ou_endereco(self.location, self.address),
            delivery_radius_km=self.delivery_radius_km,
            pricing=self.pricing.to_domain(),
            status=self.status,
            is_suspended=self.is_suspended,
        )


class ProductOptionSchema(BaseModel):
    id: str
    name: str
    price: float = Field(ge=0)
    is_available: bool = True


class ProductGroupSchema(BaseModel):
    id: str
    name: str
    min: int = Field(default=0, ge=0)
    max: int = Field(default=1, ge=1)
    options: List[ProductOptionSchema] = []


class ProductSchema(BaseModel):
    id: str
    company_id: str
    name: str
    price: float = Field(default=0.0, ge=0)
    category: str = ""
    is_available: bool = True
    pricing_mode: Literal["default", "average", "highest"] = "default"
    groups: List[ProductGroupSchema] = []

    def to_domain(self) -> Product:
        return Product(
            id=self.id,
            company_id=self.company_id,
            name=self.name,
            price=self.price,
            category=self.category,
            is_available=self.is_available,
            pricing_mode=self.pricing_mode,
            groups=[
                ProductGroup(
                    id=g.id,
                    name=g.name,
                    min=g.min,
                    max=g.max,
                    options=[ProductOption(**o.model_dump()) for o in g.options],
                )
                for g in self.groups
            ],
        )


class CatalogRequest(BaseModel):
    customer: Optional[CoordinateSchema] = None
    restaurants: List[RestaurantSchema]
    products: List[ProductSchema] = []
    search_term: str = ""
    category: str = "Tudo"
    special_filter: Optional[Literal["free", "fast"]] = None


class MatchRequest(BaseModel):
    source_text: str = ""
    query: str = ""


class ProductPriceRequest(BaseModel):
    product: ProductSchema
    selections: Dict[str, List[str]] = {}
    quantity: int = Field(default=1, ge=1)


# ============================================================
# 🛵 Despacho
# ============================================================
class DispatchOrderSchema(BaseModel):
    id: str
    pickup: Optional[CoordinateSchema] = None
    dropoff: Optional[CoordinateSchema] = None
    status: Literal[
        "pending", "preparing", "ready", "waiting_courier", "delivering", "delivered", "cancelled"
    ]
    delivery_type: Literal["own", "platform"]
    courier_id: Optional[str] = None
    delivery_code: Optional[str] = None
    delivery_fee: float = 0.0
    company_name: str = ""

    @field_validator("delivery_type", mode="before")
    @classmethod
    def alias_delivery_type(cls, v):
        return _normalizar_delivery_type(v)

    def to_domain(self) -> DispatchableOrder:
        return DispatchableOrder(
            id=self.id,
            pickup_coordinate=_coord(self.pickup),
            status=self.status,
            delivery_type_tag=self.delivery_type,
            delivery_coordinate=_coord(self.dropoff),
            courier_id=self.courier_id,
            delivery_code=self.delivery_code,
            delivery_fee=self.delivery_fee,
            company_name=self.company_name,
        )


class DispatchRequest(BaseModel):
    courier: Optional[CoordinateSchema] = None
    orders: List[DispatchOrderSchema]
    operational_radius_km: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)


class ConfirmDeliveryRequest(BaseModel):
    order: DispatchOrderSchema
    code: str


# ============================================================
# 🧾 Fechamento de pedido
# ============================================================
class CustomerSchema(BaseModel):
    id: str
    name: str = ""
    phone: str = ""
    location: Optional[CoordinateSchema] = None
    address: Optional[AddressPayload] = None

    def to_coordinate(self) -> Optional[Coordinate]:
        return _coord_ou_endereco(self.location, self.address)


class PlaceOrderRequest(BaseModel):
    restaurant: RestaurantSchema
    customer: CustomerSchema
    cart: List[CartLineSchema]
    delivery_method: Literal["delivery", "pickup"] = "delivery"
    payment_method: Literal["cash", "card", "pix"] = "card"
    change_for: Optional[float] = Field(default=None, allow_inf_nan=False)
