"""
Customer model for the Loan Ledger Service.
"""

from django.db import models


class Customer(models.Model):
    """
    A borrower registered with the ledger.

    The identifier is supplied by the caller at registration and
    the record is never changed or deleted afterwards.
    """

    customer_id = models.CharField(
        max_length=64,
        primary_key=True,
        help_text="Externally supplied customer identifier.",
    )
    name = models.CharField(
        max_length=200,
        help_text="Customer's display name.",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'customers'
        ordering = ['created_at']

    def __str__(self):
        return f"{self.name} (ID: {self.customer_id})"
