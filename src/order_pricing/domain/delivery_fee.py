#chegoou_engine/src/order_pricing/domain/delivery_fee.py

import math

from loguru import logger

from config.settings import OWN_DELIVERY_DEFAULT_FEE, PLATFORM_BASE_FEE, PLATFORM_PER_KM_FEE
from order_pricing.domain.entities import PricingConfiguration


def resolve_delivery_fee(config: PricingConfiguration, distance_km: float) -> float:
    """
    Frete de um restaurante para a distância informada.

    - own: frete fixo do restaurante (0 se não definido)
    - platform: taxa do admin, se > 0, tem precedência total sobre a distância;
      senão base + distance_km * por_km

    Com distance_km infinita (local desconhecido) o valor não tem sentido;
    quem chama deve tratar o restaurante como indisponível.
    """
    if config.delivery_type == "own":
        return config.own_flat_fee if config.own_flat_fee is not None else OWN_DELIVERY_DEFAULT_FEE

    if config.platform_override_fee is not None and config.platform_override_fee > 0:
        return config.platform_override_fee

    base = config.base_fee if config.base_fee is not None else PLATFORM_BASE_FEE
    per_km = config.per_km_fee if config.per_km_fee is not None else PLATFORM_PER_KM_FEE

    if math.isinf(distance_km):
        logger.debug("⚠️ Frete calculado com distância desconhecida (infinito).")

    return base + distance_km * per_km
