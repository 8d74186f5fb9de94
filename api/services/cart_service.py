import logging

from django.db import DEFAULT_DB_ALIAS
from django.db.models import Prefetch

from base import Constants
from base.models import CartModel, CartItemModel, ProductModel, ProductVariantModel, ProductImageModel
from base.results import ActionResult
from base.services import PricingService
from base.utils import parse_uuid

from .guest_session_service import GuestSessionService

logger = logging.getLogger(__name__)


class CartService:
    """
    Cart operations for guest shoppers, keyed by the guest session token.

    Reads return None when there is nothing to read. Mutations return an
    ActionResult.
    """

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using
        self.sessions = GuestSessionService(using=using)

    def _items(self):
        return (
            CartItemModel.objects.using(self.using)
            .select_related("product", "variant")
            .prefetch_related(
                Prefetch("product__images", queryset=ProductImageModel.objects.using(self.using).order_by("position"))
            )
            .order_by("-createdAt")
        )

    def get_cart(self, token):
        """
        Load the guest's cart with its items, newest first.

        Each item comes with its product (and the product's images) and its
        variant, so pricing and rendering do not hit the database again.

        Returns:
            CartModel | None: The cart, or None when the token has no live
            session or the session has no cart yet.
        """
        session = self.sessions.get_active(token)
        if session is None:
            return None

        return (
            CartModel.objects.using(self.using)
            .filter(guestSession=session)
            .prefetch_related(Prefetch("items", queryset=self._items()))
            .first()
        )

    def get_summary(self, token):
        """
        Item count and subtotal of the guest's cart. An absent cart is empty.
        """
        cart = self.get_cart(token)
        items = list(cart.items.all()) if cart else []
        return {
            "itemCount": sum(item.quantity for item in items),
            "subtotal": PricingService.calculate_subtotal(items),
        }

    def add_item(self, token, product_id, variant_id=None, quantity=1):
        """
        Add `quantity` units of a product (or one of its variants) to the cart.

        The cart is created on first use. Adding a product/variant that is
        already in the cart increases its quantity, up to MAX_QUANTITY.

        Returns:
            ActionResult: `data` is the cart item on success.
        """
        if not Constants.Cart.MIN_QUANTITY <= quantity <= Constants.Cart.MAX_QUANTITY:
            return ActionResult.fail(
                f"Quantity must be between {Constants.Cart.MIN_QUANTITY} and {Constants.Cart.MAX_QUANTITY}"
            )

        session = self.sessions.get_active(token)
        if session is None:
            return ActionResult.fail("No active session")

        product = ProductModel.objects.using(self.using).filter(id=product_id).first()
        if product is None:
            return ActionResult.fail("Product not found")

        variant = None
        if variant_id:
            variant = (
                ProductVariantModel.objects.using(self.using)
                .filter(id=variant_id, product=product)
                .first()
            )
            if variant is None:
                return ActionResult.fail("Variant not found")
            if not variant.isActive:
                return ActionResult.fail("This variant is not available")
        elif product.hasVariants:
            return ActionResult.fail("Please select a variant")

        cart, _ = CartModel.objects.using(self.using).get_or_create(guestSession=session)

        item, created = CartItemModel.objects.using(self.using).get_or_create(
            cart=cart,
            product=product,
            variant=variant,
            defaults={"quantity": quantity},
        )
        if not created:
            item.quantity = min(item.quantity + quantity, Constants.Cart.MAX_QUANTITY)
            item.save(using=self.using, update_fields=["quantity", "updatedAt"])

        return ActionResult.ok(item)

    def _owned_item(self, token, item_id):
        item_id = parse_uuid(item_id)
        session = self.sessions.get_active(token)
        if session is None or item_id is None:
            return None
        return (
            CartItemModel.objects.using(self.using)
            .filter(id=item_id, cart__guestSession=session)
            .first()
        )

    def update_quantity(self, token, item_id, quantity):
        """
        Set the quantity of a cart item. Anything below the minimum removes
        the item instead.

        Returns:
            ActionResult: `data` is the updated item, or None if it was removed.
        """
        if quantity > Constants.Cart.MAX_QUANTITY:
            return ActionResult.fail(f"Quantity cannot exceed {Constants.Cart.MAX_QUANTITY}")

        if quantity < Constants.Cart.MIN_QUANTITY:
            return self.remove_item(token, item_id)

        item = self._owned_item(token, item_id)
        if item is None:
            return ActionResult.fail("Cart item not found")

        item.quantity = quantity
        item.save(using=self.using, update_fields=["quantity", "updatedAt"])
        return ActionResult.ok(item)

    def remove_item(self, token, item_id):
        # Items in someone else's cart are reported as missing
        item = self._owned_item(token, item_id)
        if item is None:
            return ActionResult.fail("Cart item not found")

        item.delete()
        return ActionResult.ok()

    def clear_cart(self, token):
        """
        Delete every item in the guest's cart. Clearing an empty or missing
        cart succeeds.

        Returns:
            ActionResult: `data` is the number of deleted items.
        """
        session = self.sessions.get_active(token)
        if session is None:
            return ActionResult.fail("No active session")

        deleted, _ = (
            CartItemModel.objects.using(self.using)
            .filter(cart__guestSession=session)
            .delete()
        )
        if deleted:
            logger.info(f"Cleared {deleted} cart items for guest session {session.id}")
        return ActionResult.ok(deleted)
