"""
Customer URL configuration.
"""

from django.urls import path

from apps.customers.views import CustomerOverviewView, RegisterCustomerView

urlpatterns = [
    path('customers', RegisterCustomerView.as_view(), name='register'),
    path(
        'customers/<str:customer_id>/overview',
        CustomerOverviewView.as_view(),
        name='customer-overview',
    ),
]
