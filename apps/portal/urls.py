"""
Loan portal URL configuration.
"""

from django.urls import path

from apps.portal import views

app_name = 'portal'

urlpatterns = [
    path('', views.index, name='index'),
    path('lend/', views.lend, name='lend'),
    path('pay/', views.pay, name='pay'),
    path('ledger/', views.ledger, name='ledger'),
    path('overview/', views.overview, name='overview'),
]
