"""
Customer serializers for the Loan Ledger Service.
"""

from rest_framework import serializers


class RegisterCustomerSerializer(serializers.Serializer):
    """Serializer for customer registration request."""

    customer_id = serializers.CharField(
        max_length=64,
        required=True,
        allow_blank=False,
        help_text="Unique customer identifier chosen by the caller.",
    )
    name = serializers.CharField(
        max_length=200,
        required=True,
        allow_blank=False,
        help_text="Customer's display name.",
    )

    def validate_customer_id(self, value):
        """Reject identifiers containing a slash, which cannot appear in URLs."""
        if '/' in value:
            raise serializers.ValidationError(
                "Customer ID must not contain '/'."
            )
        return value


class RegisterCustomerResponseSerializer(serializers.Serializer):
    """Serializer for customer registration response."""

    message = serializers.CharField()
    customer_id = serializers.CharField()
    name = serializers.CharField()
