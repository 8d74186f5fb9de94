import uuid

from django.db import models
from django.db.models import CheckConstraint, UniqueConstraint, Q

from base.constants import Constants
from base.services import PricingService
from .cart_model import CartModel
from .product_model import ProductModel
from .product_variant_model import ProductVariantModel

class CartItemModel(models.Model):
  """
  A product, and optionally one of its variants, in a cart.
  One row per (cart, product, variant); adding the same combination again
  bumps the quantity instead.
  """
  id = models.UUIDField(default=uuid.uuid4, editable=False, unique=True, primary_key=True)
  cart = models.ForeignKey(CartModel, on_delete=models.CASCADE, db_column="cartId", related_name="items")
  product = models.ForeignKey(ProductModel, on_delete=models.CASCADE, db_column="productId")
  variant = models.ForeignKey(ProductVariantModel, on_delete=models.CASCADE, db_column="variantId", null=True, blank=True)
  quantity = models.PositiveSmallIntegerField(default=1)
  createdAt = models.DateTimeField(auto_now_add=True)
  updatedAt = models.DateTimeField(auto_now=True)

  @property
  def unitPrice(self):
    return PricingService.effective_unit_price(self)

  @property
  def lineTotal(self):
    return PricingService.line_total(self)

  class Meta:
    db_table = "cartItem"
    constraints = [
      UniqueConstraint(fields=["cart", "product", "variant"], name="cart_item_unique_variant"),
      # NULL variants are distinct in a plain unique index
      UniqueConstraint(
        fields=["cart", "product"],
        condition=Q(variant__isnull=True),
        name="cart_item_unique_product"
      ),
      CheckConstraint(
        condition=Q(quantity__gte=Constants.Cart.MIN_QUANTITY) & Q(quantity__lte=Constants.Cart.MAX_QUANTITY),
        name="cart_item_quantity_range"
      ),
    ]
