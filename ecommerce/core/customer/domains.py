from typing import Any, Dict, List, Optional

from pydantic import Field

from ecommerce.common.codec import JSONObjectCodec, codec_for
from ecommerce.common.domain import BaseDomain
from ecommerce.core.address.domains import Address
from ecommerce.core.customer_order.domains import CustomerOrder


class Customer(BaseDomain):
    """
    A customer with the orders and addresses it owns.

    `Customer()` gives an empty record for a mapping layer to fill in, both
    relations read as empty lists and count as unset. `Customer.from_json_object`
    builds one from a parsed JSON object.
    """

    id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    orders: List[CustomerOrder] = Field(default_factory=list, alias='listCustomerOrder')
    addresses: List[Address] = Field(default_factory=list, alias='listAddress')

    @classmethod
    def from_json_object(cls, source: Any, codec: Optional[JSONObjectCodec['Customer']] = None) -> 'Customer':
        """
        Decoding is left entirely to the codec, `source` is handed over untouched.
        :raises DataFormatException: when `source` is not a structured-data object of this shape
        """
        codec = codec or codec_for(cls)
        return codec.decode(source)

    def to_json_object(self, exclude_unset: bool = False) -> Dict[str, Any]:
        return codec_for(type(self)).encode(self, exclude_unset=exclude_unset)
