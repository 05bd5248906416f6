from django.urls import path

from .views import CartItemDetailView, CartView, CheckoutView

urlpatterns = [
    path("", CartView.as_view(), name="api-cart"),
    path("items/<int:product_id>/", CartItemDetailView.as_view(), name="api-cart-item"),
    path("checkout/", CheckoutView.as_view(), name="api-cart-checkout"),
]
