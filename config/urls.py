"""
URL configuration for the Loan Ledger Service.
"""

from django.contrib import admin
from django.contrib.auth import views as auth_views
from django.urls import include, path
from django.views.generic import RedirectView

from apps.core.views import health_check

urlpatterns = [
    path('', RedirectView.as_view(pattern_name='portal:index', permanent=False)),
    path('admin/', admin.site.urls),
    path(
        'accounts/login/',
        auth_views.LoginView.as_view(template_name='portal/login.html'),
        name='login',
    ),
    path('accounts/logout/', auth_views.LogoutView.as_view(), name='logout'),
    path('health/', health_check, name='health-check'),
    path('api/v1/', include('apps.customers.urls')),
    path('api/v1/', include('apps.loans.urls')),
    path('portal/', include('apps.portal.urls')),
]
