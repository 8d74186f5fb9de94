import uuid

from django.db import models

from .product_model import ProductModel

class VariantOptionModel(models.Model):
    """
    An option axis of a product, e.g. name="Size", values=["S", "M", "L"]
    """
    id = models.UUIDField(default=uuid.uuid4, primary_key=True, editable=False)
    product = models.ForeignKey(ProductModel, on_delete=models.CASCADE, db_column="productId", related_name="variantOptions")
    name = models.CharField(max_length=100)
    values = models.JSONField(default=list)

    class Meta:
        db_table = "variantOption"
