#chegoou_engine/src/order_pricing/domain/exceptions.py


class PricingValidationError(ValueError):
    """Erro corrigível pelo usuário antes de fechar o pedido."""


class InvalidCartLineError(PricingValidationError):
    pass


class InvalidCashChangeError(PricingValidationError):
    pass


class InvalidOptionSelectionError(PricingValidationError):
    pass


class OrderPlacementError(PricingValidationError):
    pass


class RestaurantUnavailableError(OrderPlacementError):
    pass


class OutOfDeliveryAreaError(OrderPlacementError):
    pass


class EmptyCartError(OrderPlacementError):
    pass
