from django.conf import settings
from django.db import models


class PaymentOption(models.TextChoices):
    DEFAULT = "PAYMENT_OPTION_DEFAULT", "Default"
    VISA = "PAYMENT_OPTION_VISA", "Visa"
    UPI = "PAYMENT_OPTION_UPI", "UPI"


def default_payment_option() -> str:
    return settings.DEFAULT_PAYMENT_OPTION


class Cart(models.Model):
    # Owner key; not a foreign key so a cart outlives account edits.
    email = models.EmailField(unique=True)
    payment_option = models.CharField(
        max_length=32, choices=PaymentOption.choices, default=default_payment_option
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Cart {self.id} for {self.email}"


class CartItem(models.Model):
    """A line in a cart holding a copy of the product as it was when added."""

    cart = models.ForeignKey(Cart, on_delete=models.CASCADE, related_name="cart_items")
    position = models.PositiveIntegerField(default=0)
    product_id = models.BigIntegerField()
    name = models.CharField(max_length=255)
    category = models.CharField(max_length=100)
    rating = models.PositiveSmallIntegerField(default=0)
    cost = models.DecimalField(max_digits=10, decimal_places=2)
    image = models.TextField(blank=True, default="")
    quantity = models.PositiveIntegerField()

    class Meta:
        db_table = "cart_items"
        ordering = ["position", "id"]
        unique_together = ("cart", "product_id")

    def __str__(self):
        return f"{self.quantity} x {self.name}"
