from django.contrib import admin

from apps.customers.models import Customer


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ('customer_id', 'name', 'created_at')
    search_fields = ('customer_id', 'name')
    readonly_fields = ('created_at',)
