import pytest
from sqlalchemy import and_

# Using addresses here to test with
from ecommerce.core.address import Address, AddressModel
from ecommerce.core.customer import CustomerModel
from ecommerce.network.database.repository.exceptions import (
    MultipleRepositoryObjectsFound,
    PreventingModelTruncation,
    RepositoryObjectNotFound,
)


@pytest.fixture
def customer_id() -> int:
    return CustomerModel._create(first_name='Ada').id


class TestRepositoryMixinMethods:
    def test_table_names(self):
        assert CustomerModel.__tablename__ == 'customer'
        assert AddressModel.__tablename__ == 'address'

    def test_create_and_get(self, customer_id):
        created = AddressModel.create(Address(customer_id=customer_id, city='X'))

        assert created.id is not None
        assert AddressModel.get(AddressModel.id == created.id).city == 'X'

    def test_create_ignores_unmapped_keys(self, customer_id):
        record = Address.model_validate({'customerId': customer_id, 'city': 'X', 'unit': '4B'})
        created = AddressModel.create(record)

        assert created.city == 'X'

    def test_get_missing(self):
        with pytest.raises(RepositoryObjectNotFound):
            AddressModel.get(AddressModel.id == -1)

    def test_get_multiple(self, customer_id):
        AddressModel.create(Address(customer_id=customer_id, city='X'))
        AddressModel.create(Address(customer_id=customer_id, city='X'))

        with pytest.raises(MultipleRepositoryObjectsFound):
            AddressModel.get(city='X')

    def test_get_or_none(self):
        assert AddressModel.get_or_none(AddressModel.id == -1) is None

    def test_list_ordering(self, customer_id):
        AddressModel.create(Address(customer_id=customer_id, city='A'))
        AddressModel.create(Address(customer_id=customer_id, city='B'))

        cities = [a.city for a in AddressModel.list(customer_id=customer_id, ordering=['-city'])]
        assert cities == ['B', 'A']

    def test_update(self, customer_id):
        created = AddressModel.create(Address(customer_id=customer_id, city='X'))

        updated = AddressModel.update(id=created.id, city='Y')
        assert updated.city == 'Y'

        with pytest.raises(ValueError):
            AddressModel.update(id=created.id, unit='4B')

    def test_delete(self, customer_id):
        created = AddressModel.create(Address(customer_id=customer_id, city='X'))

        assert AddressModel.delete(AddressModel.id == created.id) == 1
        assert AddressModel.get_or_none(AddressModel.id == created.id) is None

    def test_delete_without_clauses(self):
        with pytest.raises(PreventingModelTruncation):
            AddressModel.delete()

    # and_() with no arguments is deprecated but is still what callers build from an empty list
    @pytest.mark.filterwarnings('ignore::sqlalchemy.exc.SADeprecationWarning')
    def test_delete_with_empty_clauses(self):
        with pytest.raises(PreventingModelTruncation):
            AddressModel.delete(and_())
