"""Lookup failures shared by every service."""

from .base import DomainException


class ResourceNotFoundException(DomainException):
    """Raised when a record cannot be found by the given field value."""

    def __init__(self, resource_name: str, field_name: str, field_value: str):
        super().__init__(
            message=(
                f"{resource_name} not found with the given input data "
                f"{field_name} : '{field_value}'"
            ),
            code="RESOURCE_NOT_FOUND",
        )
        self.resource_name = resource_name
        self.field_name = field_name
        self.field_value = field_value


class AlreadyExistsException(DomainException):
    """Raised when a create collides with an existing unique mobile number."""

    def __init__(self, resource_name: str, mobile_number: str):
        super().__init__(
            message=(
                f"{resource_name} already registered with given "
                f"mobileNumber {mobile_number}"
            ),
            code=f"{resource_name.upper()}_ALREADY_EXISTS",
        )
        self.mobile_number = mobile_number


class CustomerAlreadyExistsException(AlreadyExistsException):
    """Raised when a customer with the mobile number is already registered."""

    def __init__(self, mobile_number: str):
        super().__init__("Customer", mobile_number)


class LoanAlreadyExistsException(AlreadyExistsException):
    """Raised when a loan is already registered for the mobile number."""

    def __init__(self, mobile_number: str):
        super().__init__("Loan", mobile_number)


class CardAlreadyExistsException(AlreadyExistsException):
    """Raised when a card is already registered for the mobile number."""

    def __init__(self, mobile_number: str):
        super().__init__("Card", mobile_number)
