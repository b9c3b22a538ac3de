from typing import Any, Dict, List

from loguru import logger
from sqlalchemy.exc import IntegrityError

from ecommerce.common.codec import JSONObjectCodec, codec_for
from ecommerce.core.address.models import AddressModel
from ecommerce.core.customer.domains import Customer
from ecommerce.core.customer.exceptions import CustomerNotFound
from ecommerce.core.customer.models import CustomerModel
from ecommerce.core.customer_order.models import CustomerOrderModel
from ecommerce.network.database.repository.exceptions import RepositoryObjectNotFound


class CustomerService:
    def __init__(self, codec: JSONObjectCodec[Customer]) -> None:
        self.codec = codec

    @classmethod
    def factory(cls) -> 'CustomerService':
        return cls(codec=codec_for(Customer))

    def save_customer(self, customer: Customer) -> Customer:
        """
        Insert a customer together with the orders and addresses it owns.
        Ids carried by the record are ignored, the database assigns new ones
        """
        model_instance = CustomerModel(**self._columns(CustomerModel, customer))
        model_instance.orders = [CustomerOrderModel(**self._columns(CustomerOrderModel, o)) for o in customer.orders]
        model_instance.addresses = [AddressModel(**self._columns(AddressModel, a)) for a in customer.addresses]

        session = CustomerModel._get_session()
        session.add(model_instance)
        try:
            session.flush()
        except IntegrityError:
            session.rollback()
            raise
        logger.info(
            f'saved customer {model_instance.id} with {len(customer.orders)} order(s)'
            f' and {len(customer.addresses)} address(es)'
        )
        return CustomerModel._to_domain(model_instance)

    def get_customer(self, customer_id: int) -> Customer:
        try:
            return CustomerModel.get(CustomerModel.id == customer_id)
        except RepositoryObjectNotFound:
            raise CustomerNotFound(message=f'Customer not found with id: {customer_id}')

    def list_customers(self) -> List[Customer]:
        return CustomerModel.list(ordering=['id'])

    def delete_customer(self, customer_id: int) -> None:
        deleted = CustomerModel.delete(CustomerModel.id == customer_id)
        if not deleted:
            raise CustomerNotFound(message=f'Customer not found with id: {customer_id}')

    def import_customer(self, source: Any) -> Customer:
        customer = self.codec.decode(source)
        return self.save_customer(customer)

    def export_customer(self, customer_id: int) -> Dict[str, Any]:
        return self.codec.encode(self.get_customer(customer_id))

    @staticmethod
    def _columns(model: Any, record: Any) -> Dict[str, Any]:
        values = model._to_columns(record)
        values.pop('id', None)
        # Set through the relationship instead
        values.pop('customer_id', None)
        return values
