from datetime import datetime
from decimal import Decimal
from typing import Optional

from ecommerce.common.domain import BaseDomain


class CustomerOrder(BaseDomain):
    id: Optional[int] = None
    customer_id: Optional[int] = None
    order_date: Optional[datetime] = None
    status: Optional[str] = None
    total_amount: Optional[Decimal] = None
