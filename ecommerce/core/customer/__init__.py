from ecommerce.core.customer.domains import Customer
from ecommerce.core.customer.exceptions import CustomerNotFound
from ecommerce.core.customer.models import CustomerModel
from ecommerce.core.customer.service import CustomerService

__all__ = [
    'Customer',
    'CustomerModel',
    'CustomerNotFound',
    'CustomerService',
]
