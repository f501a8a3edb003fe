from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Customer',
            fields=[
                ('customer_id', models.CharField(help_text='Externally supplied customer identifier.', max_length=64, primary_key=True, serialize=False)),
                ('name', models.CharField(help_text="Customer's display name.", max_length=200)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'db_table': 'customers',
                'ordering': ['created_at'],
            },
        ),
    ]
