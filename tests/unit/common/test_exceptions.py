from ecommerce.common.exceptions import DataFormatException, InternalException
from ecommerce.core.customer import CustomerNotFound


def test_default_message():
    exc = DataFormatException()
    assert exc.message == 'Malformed structured data.'
    assert exc.context == {}
    assert str(exc) == 'DataFormatException(Malformed structured data.)'


def test_message_and_context():
    exc = DataFormatException(message='bad', context=[{'loc': ('listAddress',)}])
    assert exc.message == 'bad'
    assert exc.context == [{'loc': ('listAddress',)}]


def test_taxonomy():
    assert issubclass(DataFormatException, InternalException)
    assert issubclass(CustomerNotFound, InternalException)
