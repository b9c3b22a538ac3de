from ecommerce.common.exceptions import InternalException


class CustomerNotFound(InternalException):
    default_detail = 'Customer not found.'
