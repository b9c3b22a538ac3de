from ecommerce.core.address.domains import Address
from ecommerce.core.address.models import AddressModel

__all__ = [
    'Address',
    'AddressModel',
]
