#chegoou_engine/src/courier_dispatch/domain/exceptions.py


class DispatchError(ValueError):
    pass


class InvalidDeliveryCodeError(DispatchError):
    """Código informado pelo entregador não confere com o do pedido."""


class OrderNotDeliveringError(DispatchError):
    pass
