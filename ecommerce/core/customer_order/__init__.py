from ecommerce.core.customer_order.domains import CustomerOrder
from ecommerce.core.customer_order.models import CustomerOrderModel

__all__ = [
    'CustomerOrder',
    'CustomerOrderModel',
]
