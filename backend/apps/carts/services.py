from __future__ import annotations

from decimal import Decimal
from typing import Optional, Union

from django.conf import settings
from django.db import transaction

from apps.api.exceptions import InternalError, InvalidRequestError, NotFoundError
from apps.common import get_logger
from .dtos import CartDTO, CartItemDTO, CartItemRemoved, CartItemUpdated
from .mappers import ProductSnapshotMapper
from .protocols import (
    AccountRepositoryProtocol,
    CartRepositoryProtocol,
    ProductRepositoryProtocol,
)

logger = get_logger(__name__).bind(component="carts", layer="service")

NO_CART = "User does not have a cart"
NO_CART_FOR_UPDATE = "User does not have a cart. Use POST to create cart and add a product"
PRODUCT_NOT_IN_CATALOG = "Product doesn't exist in database"
PRODUCT_ALREADY_IN_CART = (
    "Product already in cart. Use the cart sidebar to update or remove product from cart"
)
PRODUCT_NOT_IN_CART = "Product not in cart"
CART_CREATE_FAILED = "Failed to create cart"
CART_UPDATE_FAILED = "Failed to update cart"
CART_EMPTY = "Cart is empty"
ADDRESS_NOT_SET = "Address not set"
INSUFFICIENT_BALANCE = "Wallet balance is insufficient"


def _as_decimal(value) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


class CartService:
    def __init__(
        self,
        carts: CartRepositoryProtocol,
        products: ProductRepositoryProtocol,
        accounts: AccountRepositoryProtocol,
        default_payment_option: Optional[str] = None,
    ):
        self.carts = carts
        self.products = products
        self.accounts = accounts
        self._default_payment_option = default_payment_option
        self.logger = logger.bind(service="CartService")

    @property
    def default_payment_option(self) -> str:
        return self._default_payment_option or settings.DEFAULT_PAYMENT_OPTION

    def get_cart_by_user(self, user) -> CartDTO:
        self.logger.debug("Fetching cart", email=user.email)
        cart = self.carts.get_by_email(user.email)
        if cart is None:
            self.logger.info("Cart not found", email=user.email)
            raise NotFoundError(NO_CART)
        return cart

    def add_product_to_cart(self, user, product_id: int, quantity: int) -> CartDTO:
        self.logger.debug(
            "Adding product to cart", email=user.email, product_id=product_id, quantity=quantity
        )
        product = self.products.get(id=product_id)
        if not product:
            self.logger.warning("Add rejected: unknown product", product_id=product_id)
            raise InvalidRequestError(PRODUCT_NOT_IN_CATALOG)
        cart = self.carts.get_by_email(user.email)
        if cart is None:
            cart = self.carts.create(
                email=user.email, items=[], payment_option=self.default_payment_option
            )
            if cart is None:
                self.logger.error("Cart creation returned nothing", email=user.email)
                raise InternalError(CART_CREATE_FAILED)
            self.logger.info("Cart created", email=user.email, cart_id=cart.id)
        if cart.find_item(product.id) is not None:
            self.logger.warning(
                "Add rejected: product already in cart", cart_id=cart.id, product_id=product.id
            )
            raise InvalidRequestError(PRODUCT_ALREADY_IN_CART)
        cart.items.append(
            CartItemDTO(product=ProductSnapshotMapper.from_product(product), quantity=quantity)
        )
        saved = self._persist(cart)
        self.logger.info("Product added to cart", cart_id=saved.id, product_id=product.id)
        return saved

    def update_product_in_cart(
        self, user, product_id: int, quantity: int
    ) -> Union[CartItemUpdated, CartItemRemoved]:
        """
        Set the quantity of a product already in the cart.

        A positive quantity replaces the stored one and returns ``CartItemUpdated``.
        Zero or a negative quantity removes the line and returns ``CartItemRemoved``.
        A missing cart is never created here.
        """
        self.logger.debug(
            "Updating cart item", email=user.email, product_id=product_id, quantity=quantity
        )
        cart = self.carts.get_by_email(user.email)
        if cart is None:
            self.logger.warning("Update rejected: no cart", email=user.email)
            raise InvalidRequestError(NO_CART_FOR_UPDATE)
        if not self.products.get(id=product_id):
            self.logger.warning("Update rejected: unknown product", product_id=product_id)
            raise InvalidRequestError(PRODUCT_NOT_IN_CATALOG)
        item = cart.find_item(product_id)
        if item is None:
            self.logger.warning(
                "Update rejected: product not in cart", cart_id=cart.id, product_id=product_id
            )
            raise InvalidRequestError(PRODUCT_NOT_IN_CART)
        if quantity > 0:
            item.quantity = quantity
            saved = self._persist(cart)
            self.logger.info(
                "Cart item quantity updated", cart_id=cart.id, product_id=product_id, quantity=quantity
            )
            return CartItemUpdated(cart=saved)
        cart.items = [i for i in cart.items if i.product.id != product_id]
        self._persist(cart)
        self.logger.info("Cart item removed via update", cart_id=cart.id, product_id=product_id)
        return CartItemRemoved()

    def delete_product_from_cart(self, user, product_id: int) -> CartDTO:
        self.logger.debug("Deleting cart item", email=user.email, product_id=product_id)
        cart = self.carts.get_by_email(user.email)
        if cart is None:
            self.logger.warning("Delete rejected: no cart", email=user.email)
            raise InvalidRequestError(NO_CART)
        item = cart.find_item(product_id)
        if item is None:
            self.logger.warning(
                "Delete rejected: product not in cart", cart_id=cart.id, product_id=product_id
            )
            raise InvalidRequestError(PRODUCT_NOT_IN_CART)
        cart.items.remove(item)
        saved = self._persist(cart)
        self.logger.info("Cart item deleted", cart_id=cart.id, product_id=product_id)
        return saved

    def checkout(self, user) -> CartDTO:
        """
        Pay for the whole cart from the wallet and empty it.

        The wallet debit and the cart clear commit together or not at all; the
        account row stays locked until the transaction ends. Prices come from the
        snapshots stored in the cart, not from the live catalog.

        The cart is read only after the lock is held, so a concurrent checkout
        of the same user is seen as an already emptied cart.
        """
        self.logger.debug("Starting checkout", email=user.email)
        with transaction.atomic():
            account = self.accounts.lock_by_email(user.email)
            cart = self.carts.get_by_email(user.email)
            if cart is None:
                self.logger.info("Checkout rejected: no cart", email=user.email)
                raise NotFoundError(NO_CART)
            if not cart.items:
                self.logger.warning("Checkout rejected: cart empty", cart_id=cart.id)
                raise InvalidRequestError(CART_EMPTY)
            if account is None:
                self.logger.warning("Checkout rejected: account missing", email=user.email)
                raise NotFoundError("User not found")
            if not account.has_set_non_default_address():
                self.logger.warning("Checkout rejected: address not set", email=user.email)
                raise InvalidRequestError(ADDRESS_NOT_SET)
            total = cart.total
            balance = _as_decimal(account.wallet_money)
            if total > balance:
                self.logger.warning(
                    "Checkout rejected: insufficient balance",
                    email=user.email,
                    total=total,
                    balance=balance,
                )
                raise InvalidRequestError(INSUFFICIENT_BALANCE)
            account.wallet_money = balance - total
            self.accounts.save_wallet(account)
            cart.items = []
            saved = self._persist(cart)
        if account is not user:
            user.wallet_money = account.wallet_money
        self.logger.info(
            "Checkout completed", email=user.email, total=total, balance=account.wallet_money
        )
        return saved

    def _persist(self, cart: CartDTO) -> CartDTO:
        saved = self.carts.save(cart)
        if saved is None:
            self.logger.error("Cart save returned nothing", cart_id=cart.id, email=cart.email)
            raise InternalError(CART_UPDATE_FAILED)
        return saved
