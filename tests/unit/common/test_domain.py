from ecommerce.common.domain import to_camel
from ecommerce.core.address import Address


def test_to_camel():
    assert to_camel('postal_code') == 'postalCode'
    assert to_camel('list_customer_order') == 'listCustomerOrder'
    assert to_camel('city') == 'city'


class TestProvidedFields:
    def test_explicit_null_is_provided(self):
        address = Address.model_validate({'city': 'X', 'state': None})

        assert address.was_field_provided('city')
        assert address.was_field_provided('state')
        assert not address.was_field_provided('country')
        assert address.get_provided_fields() == {'city': 'X', 'state': None}

    def test_to_dict_uses_attribute_names(self):
        address = Address(postal_code='1000')
        data = address.to_dict()

        assert data['postal_code'] == '1000'
        assert data['city'] is None

    def test_accepts_alias_or_name(self):
        assert Address(postalCode='1000') == Address(postal_code='1000')
