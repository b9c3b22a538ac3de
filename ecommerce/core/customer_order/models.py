from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ecommerce.common.model import BaseModel
from ecommerce.core.customer_order.domains import CustomerOrder

if TYPE_CHECKING:
    from ecommerce.core.customer.models import CustomerModel


class CustomerOrderModel(BaseModel[CustomerOrder, CustomerOrder]):
    customer_id: Mapped[int] = mapped_column(ForeignKey('customer.id', ondelete='CASCADE'), nullable=False, index=True)
    order_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    status: Mapped[Optional[str]] = mapped_column(String(length=50), nullable=True)
    total_amount: Mapped[Optional[Decimal]] = mapped_column(Numeric(12, 2), nullable=True)

    customer: Mapped['CustomerModel'] = relationship(back_populates='orders')

    __read_domain__ = CustomerOrder
    __create_domain__ = CustomerOrder
