import apps.carts.models
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Cart",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("email", models.EmailField(max_length=254, unique=True)),
                (
                    "payment_option",
                    models.CharField(
                        choices=[
                            ("PAYMENT_OPTION_DEFAULT", "Default"),
                            ("PAYMENT_OPTION_VISA", "Visa"),
                            ("PAYMENT_OPTION_UPI", "UPI"),
                        ],
                        default=apps.carts.models.default_payment_option,
                        max_length=32,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
        ),
        migrations.CreateModel(
            name="CartItem",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("position", models.PositiveIntegerField(default=0)),
                ("product_id", models.BigIntegerField()),
                ("name", models.CharField(max_length=255)),
                ("category", models.CharField(max_length=100)),
                ("rating", models.PositiveSmallIntegerField(default=0)),
                ("cost", models.DecimalField(decimal_places=2, max_digits=10)),
                ("image", models.TextField(blank=True, default="")),
                ("quantity", models.PositiveIntegerField()),
                (
                    "cart",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="cart_items",
                        to="carts.cart",
                    ),
                ),
            ],
            options={
                "db_table": "cart_items",
                "ordering": ["position", "id"],
                "unique_together": {("cart", "product_id")},
            },
        ),
    ]
