from django.contrib import admin

from apps.loans.models import Loan, Payment


class PaymentInline(admin.TabularInline):
    model = Payment
    extra = 0
    can_delete = False
    readonly_fields = ('sequence', 'payment_id', 'amount', 'payment_type', 'payment_date')

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Loan)
class LoanAdmin(admin.ModelAdmin):
    list_display = (
        'loan_id', 'customer', 'principal_amount', 'total_amount',
        'remaining_amount', 'interest_rate', 'loan_period_years',
        'monthly_emi', 'status', 'created_at',
    )
    list_filter = ('status', 'created_at')
    search_fields = ('loan_id', 'customer__customer_id', 'customer__name')
    readonly_fields = (
        'loan_id', 'principal_amount', 'total_amount', 'remaining_amount',
        'interest_rate', 'loan_period_years', 'monthly_emi', 'status',
        'created_at', 'updated_at',
    )
    raw_id_fields = ('customer',)
    inlines = (PaymentInline,)


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = ('payment_id', 'loan', 'payment_type', 'amount', 'payment_date')
    list_filter = ('payment_type', 'payment_date')
    search_fields = ('payment_id', 'loan__loan_id')
    readonly_fields = ('payment_id', 'loan', 'sequence', 'amount', 'payment_type', 'payment_date')
