import uuid

from django.db import models

from .product_model import ProductModel

class ProductImageModel(models.Model):
    id = models.UUIDField(default=uuid.uuid4, primary_key=True, editable=False)
    product = models.ForeignKey(ProductModel, on_delete=models.CASCADE, db_column="productId", related_name="images")
    url = models.CharField(max_length=1000)
    alt = models.CharField(max_length=255, null=True, blank=True)
    position = models.PositiveIntegerField(default=0)
    isPrimary = models.BooleanField(default=False)

    class Meta:
        db_table = "productImage"
        ordering = ["position"]
