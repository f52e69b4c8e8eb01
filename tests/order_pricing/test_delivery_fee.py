# tests/order_pricing/test_delivery_fee.py

import pytest

from order_pricing.domain.delivery_fee import resolve_delivery_fee
from order_pricing.domain.entities import PricingConfiguration


def test_own_delivery_uses_flat_fee():
    config = PricingConfiguration(delivery_type="own", own_flat_fee=7.5)
    assert resolve_delivery_fee(config, 12.0) == 7.5


def test_own_delivery_without_fee_is_free():
    config = PricingConfiguration(delivery_type="own")
    assert resolve_delivery_fee(config, 3.0) == 0


def test_platform_override_has_precedence_over_distance():
    config = PricingConfiguration(
        delivery_type="platform",
        platform_override_fee=8,
        per_km_fee=1.5,
    )
    assert resolve_delivery_fee(config, 20) == 8


def test_platform_zero_override_falls_back_to_formula():
    config = PricingConfiguration(delivery_type="platform", platform_override_fee=0)
    assert resolve_delivery_fee(config, 4) == pytest.approx(5.00 + 4 * 1.50)


def test_platform_defaults():
    config = PricingConfiguration(delivery_type="platform")
    assert resolve_delivery_fee(config, 0) == pytest.approx(5.00)
    assert resolve_delivery_fee(config, 10) == pytest.approx(20.00)


def test_platform_custom_base_and_per_km():
    config = PricingConfiguration(delivery_type="platform", base_fee=3, per_km_fee=2)
    assert resolve_delivery_fee(config, 2.5) == pytest.approx(8.0)
