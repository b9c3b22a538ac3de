from decimal import Decimal

from polyfactory import Ignore, Use
from polyfactory.factories.pydantic_factory import ModelFactory
from polyfactory.pytest_plugin import register_fixture

from ecommerce.core.address import Address
from ecommerce.core.customer import Customer
from ecommerce.core.customer_order import CustomerOrder
from tests.factories.base import Faker

ORDER_STATUSES = ['PLACED', 'PAID', 'SHIPPED', 'DELIVERED']


@register_fixture(scope='session', autouse=True, name='address_factory')
class AddressFactory(ModelFactory[Address]):
    __model__ = Address
    __allow_none_optionals__ = False
    __set_as_default_factory_for_type__ = True

    id = Ignore()
    customer_id = Ignore()
    street = Use(Faker.street_address)
    city = Use(Faker.city)
    state = Use(Faker.state)
    postal_code = Use(Faker.postcode)
    country = Use(Faker.country)


@register_fixture(scope='session', autouse=True, name='customer_order_factory')
class CustomerOrderFactory(ModelFactory[CustomerOrder]):
    __model__ = CustomerOrder
    __allow_none_optionals__ = False
    __set_as_default_factory_for_type__ = True

    id = Ignore()
    customer_id = Ignore()
    order_date = Use(lambda: Faker.date_time_this_year().replace(microsecond=0))
    status = Use(Faker.random_element, ORDER_STATUSES)
    total_amount = Use(lambda: Decimal(Faker.random_int(min=100, max=99999)) / 100)


@register_fixture(scope='session', autouse=True, name='customer_factory')
class CustomerFactory(ModelFactory[Customer]):
    __model__ = Customer
    __allow_none_optionals__ = False

    id = Ignore()
    first_name = Use(Faker.first_name)
    last_name = Use(Faker.last_name)
    email = Use(Faker.email)
    phone = Use(Faker.phone_number)
