import uuid
from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('customers', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Loan',
            fields=[
                ('loan_id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('principal_amount', models.DecimalField(decimal_places=2, help_text='Amount lent.', max_digits=15, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('total_amount', models.DecimalField(decimal_places=2, help_text='Principal plus simple interest for the full period.', max_digits=15)),
                ('remaining_amount', models.DecimalField(decimal_places=2, help_text='Outstanding balance, floored at zero.', max_digits=15, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('interest_rate', models.DecimalField(decimal_places=2, help_text='Annual interest rate (percentage).', max_digits=5, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('loan_period_years', models.PositiveIntegerField(help_text='Loan period in years.', validators=[django.core.validators.MinValueValidator(1)])),
                ('monthly_emi', models.DecimalField(decimal_places=2, help_text='Fixed monthly installment.', max_digits=15)),
                ('status', models.CharField(choices=[('ACTIVE', 'Active'), ('PAID_OFF', 'Paid off')], db_index=True, default='ACTIVE', max_length=10)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('customer', models.ForeignKey(db_column='customer_id', help_text='The customer who owns this loan.', on_delete=django.db.models.deletion.PROTECT, related_name='loans', to='customers.customer')),
            ],
            options={
                'db_table': 'loans',
                'ordering': ['created_at'],
                'indexes': [models.Index(fields=['customer', 'created_at'], name='idx_loan_customer_created')],
            },
        ),
        migrations.CreateModel(
            name='Payment',
            fields=[
                ('payment_id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('amount', models.DecimalField(decimal_places=2, max_digits=15, validators=[django.core.validators.MinValueValidator(Decimal('0.01'))])),
                ('payment_type', models.CharField(choices=[('EMI', 'EMI'), ('LUMP_SUM', 'Lump sum')], max_length=10)),
                ('payment_date', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('sequence', models.PositiveIntegerField(help_text="Position of this payment in the loan's history, from 1.")),
                ('loan', models.ForeignKey(db_column='loan_id', on_delete=django.db.models.deletion.PROTECT, related_name='payments', to='loans.loan')),
            ],
            options={
                'db_table': 'payments',
                'ordering': ['payment_date', 'sequence'],
            },
        ),
        migrations.AddConstraint(
            model_name='payment',
            constraint=models.UniqueConstraint(fields=('loan', 'sequence'), name='uniq_payment_loan_sequence'),
        ),
    ]
