import types
import unittest
from decimal import Decimal
from unittest.mock import Mock, patch

from rest_framework.test import APIRequestFactory, force_authenticate

from apps.api.exceptions import InvalidRequestError, NotFoundError
from apps.carts.dtos import (
    CartDTO,
    CartItemDTO,
    CartItemRemoved,
    CartItemUpdated,
    ProductSnapshotDTO,
)
from apps.carts.views import CartItemDetailView, CartView, CheckoutView


def make_cart(quantity=2):
    snapshot = ProductSnapshotDTO(
        id=1, name="ball", category="Sports", rating=5, cost=Decimal("20.00"), image="google.com"
    )
    return CartDTO(
        id=1,
        email="crio-user@gmail.com",
        payment_option="PAYMENT_OPTION_DEFAULT",
        items=[CartItemDTO(product=snapshot, quantity=quantity)],
    )


class CartViewsUnitTests(unittest.TestCase):
    def setUp(self):
        self.factory = APIRequestFactory()
        self.user = types.SimpleNamespace(
            id=10, email="crio-user@gmail.com", is_authenticated=True
        )

    def call(self, view_cls, method, path, data=None, **kwargs):
        request = getattr(self.factory, method)(path, data, format="json")
        force_authenticate(request, user=self.user)
        return view_cls.as_view()(request, **kwargs)

    def test_get_serializes_cart(self):
        service = Mock()
        service.get_cart_by_user.return_value = make_cart()
        with patch.object(CartView, "service", service):
            response = self.call(CartView, "get", "/api/cart/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["paymentOption"], "PAYMENT_OPTION_DEFAULT")
        self.assertEqual(response.data["cartItems"][0]["product"]["name"], "ball")
        self.assertEqual(response.data["total"], Decimal("40.00"))
        service.get_cart_by_user.assert_called_once_with(self.user)

    def test_get_missing_cart_uses_error_envelope(self):
        service = Mock()
        service.get_cart_by_user.side_effect = NotFoundError("User does not have a cart")
        with patch.object(CartView, "service", service):
            response = self.call(CartView, "get", "/api/cart/")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["error"]["message"], "User does not have a cart")

    def test_post_returns_created(self):
        service = Mock()
        service.add_product_to_cart.return_value = make_cart()
        with patch.object(CartView, "service", service):
            response = self.call(CartView, "post", "/api/cart/", {"productId": 1, "quantity": 2})
        self.assertEqual(response.status_code, 201)
        service.add_product_to_cart.assert_called_once_with(self.user, 1, 2)

    def test_post_rejects_zero_quantity(self):
        service = Mock()
        with patch.object(CartView, "service", service):
            response = self.call(CartView, "post", "/api/cart/", {"productId": 1, "quantity": 0})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"]["code"], "VALIDATION_ERROR")
        service.add_product_to_cart.assert_not_called()

    def test_post_rejects_oversized_quantity(self):
        service = Mock()
        with patch.object(CartView, "service", service):
            response = self.call(
                CartView, "post", "/api/cart/", {"productId": 1, "quantity": 100000000000}
            )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"]["code"], "VALIDATION_ERROR")
        service.add_product_to_cart.assert_not_called()

    def test_put_rejects_oversized_quantity(self):
        service = Mock()
        with patch.object(CartView, "service", service):
            response = self.call(
                CartView, "put", "/api/cart/", {"productId": 1, "quantity": 100000000000}
            )
        self.assertEqual(response.status_code, 400)
        service.update_product_in_cart.assert_not_called()

    def test_post_business_rule_failure(self):
        service = Mock()
        service.add_product_to_cart.side_effect = InvalidRequestError(
            "Product doesn't exist in database"
        )
        with patch.object(CartView, "service", service):
            response = self.call(CartView, "post", "/api/cart/", {"productId": 99, "quantity": 1})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"]["code"], "INVALID_REQUEST")

    def test_put_update_returns_cart(self):
        service = Mock()
        service.update_product_in_cart.return_value = CartItemUpdated(cart=make_cart(quantity=5))
        with patch.object(CartView, "service", service):
            response = self.call(CartView, "put", "/api/cart/", {"productId": 1, "quantity": 5})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["cartItems"][0]["quantity"], 5)

    def test_put_removal_returns_no_content(self):
        service = Mock()
        service.update_product_in_cart.return_value = CartItemRemoved()
        with patch.object(CartView, "service", service):
            response = self.call(CartView, "put", "/api/cart/", {"productId": 1, "quantity": 0})
        self.assertEqual(response.status_code, 204)
        self.assertIsNone(response.data)

    def test_delete_item(self):
        service = Mock()
        service.delete_product_from_cart.return_value = make_cart()
        with patch.object(CartItemDetailView, "service", service):
            response = self.call(CartItemDetailView, "delete", "/api/cart/items/1/", product_id=1)
        self.assertEqual(response.status_code, 200)
        service.delete_product_from_cart.assert_called_once_with(self.user, 1)

    def test_checkout_returns_no_content(self):
        service = Mock()
        service.checkout.return_value = make_cart()
        with patch.object(CheckoutView, "service", service):
            response = self.call(CheckoutView, "post", "/api/cart/checkout/")
        self.assertEqual(response.status_code, 204)
        service.checkout.assert_called_once_with(self.user)


if __name__ == "__main__":
    unittest.main()
