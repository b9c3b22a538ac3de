from typing import Optional

from ecommerce.common.domain import BaseDomain


class Address(BaseDomain):
    id: Optional[int] = None
    customer_id: Optional[int] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
