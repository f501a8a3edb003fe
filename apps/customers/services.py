"""
Customer service layer.

All customer-related business logic resides here.
Views delegate to this service.
"""

import logging

from django.db import IntegrityError, transaction

from apps.core.exceptions import CustomerAlreadyExistsError, CustomerNotFoundError
from apps.customers.models import Customer

logger = logging.getLogger(__name__)


class CustomerService:
    """Service class for customer-related operations."""

    @staticmethod
    def register(customer_id: str, name: str) -> Customer:
        """
        Register a new customer under a caller-supplied identifier.

        Args:
            customer_id: Unique, non-empty customer identifier.
            name: Customer's display name.

        Returns:
            The newly created Customer instance.

        Raises:
            CustomerAlreadyExistsError: If customer_id is already registered.
        """
        if Customer.objects.filter(pk=customer_id).exists():
            raise CustomerAlreadyExistsError(
                detail=f"Customer with ID {customer_id} already exists."
            )

        try:
            with transaction.atomic():
                customer = Customer.objects.create(customer_id=customer_id, name=name)
        except IntegrityError:
            # Lost a race with a concurrent registration of the same ID
            raise CustomerAlreadyExistsError(
                detail=f"Customer with ID {customer_id} already exists."
            )

        logger.info("Registered customer %s (%s)", customer.customer_id, customer.name)

        return customer

    @staticmethod
    def get_customer(customer_id: str) -> Customer:
        """
        Retrieve a customer by ID.

        Raises:
            CustomerNotFoundError: If customer not found.
        """
        try:
            return Customer.objects.get(pk=customer_id)
        except Customer.DoesNotExist:
            raise CustomerNotFoundError(
                detail=f"Customer with ID {customer_id} not found. Please register first."
            )
