from django.db import models
import uuid

from .product_model import ProductModel

class ProductVariantModel(models.Model):
    """
    A purchasable configuration of a product (size, colour...) with its own
    price and stock. Inactive variants cannot be added to a cart or ordered.
    """
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    product = models.ForeignKey(ProductModel, on_delete=models.CASCADE, db_column="productId", related_name="variants")
    sku = models.CharField(max_length=100, unique=True)
    name = models.CharField(max_length=255)
    options = models.JSONField(default=dict, blank=True)
    price = models.DecimalField(max_digits=12, decimal_places=2)
    salePrice = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    costPrice = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    stock = models.IntegerField(default=0)
    imageUrl = models.CharField(max_length=1000, null=True, blank=True)
    isActive = models.BooleanField(default=True)

    def __str__(self):
        return f"{self.product.name} - {self.name}"

    class Meta:
        db_table = "productVariant"
