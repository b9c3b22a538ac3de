from typing import List, Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ecommerce.common.model import BaseModel
from ecommerce.core.address.models import AddressModel
from ecommerce.core.customer.domains import Customer
from ecommerce.core.customer_order.models import CustomerOrderModel


class CustomerModel(BaseModel[Customer, Customer]):
    first_name: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String, nullable=True, index=True)
    phone: Mapped[Optional[str]] = mapped_column(String(length=50), nullable=True)

    # Owned by composition, children go with the customer
    orders: Mapped[List[CustomerOrderModel]] = relationship(
        back_populates='customer',
        cascade='all, delete-orphan',
        order_by='CustomerOrderModel.id',
    )
    addresses: Mapped[List[AddressModel]] = relationship(
        back_populates='customer',
        cascade='all, delete-orphan',
        order_by='AddressModel.id',
    )

    __read_domain__ = Customer
    __create_domain__ = Customer
