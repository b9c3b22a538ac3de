from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ecommerce.common.model import BaseModel
from ecommerce.core.address.domains import Address

if TYPE_CHECKING:
    from ecommerce.core.customer.models import CustomerModel


class AddressModel(BaseModel[Address, Address]):
    customer_id: Mapped[int] = mapped_column(ForeignKey('customer.id', ondelete='CASCADE'), nullable=False, index=True)
    street: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    state: Mapped[Optional[str]] = mapped_column(String, nullable=True)
    postal_code: Mapped[Optional[str]] = mapped_column(String(length=20), nullable=True)
    country: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    customer: Mapped['CustomerModel'] = relationship(back_populates='addresses')

    __read_domain__ = Address
    __create_domain__ = Address
