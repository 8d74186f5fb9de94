from django.db import models
from django.db.models import CheckConstraint, Q
import uuid

from base.enums import FEATURED_TYPE
from .category_model import CategoryModel

class ProductModel(models.Model):
    """
    A catalog product.
    Columns:
        basePrice   Regular price of the product.
        salePrice   Discounted price, used instead of basePrice when set.
        stock       Units on hand. Only meaningful when hasVariants is False,
                    otherwise every ProductVariantModel carries its own stock.
        hasVariants Whether the product is sold through its variants.
        featuredType Storefront section the product is featured in, if any.
    """
    id          = models.UUIDField(default=uuid.uuid4, editable=False, unique=True, primary_key=True)
    name        = models.CharField(max_length=255)
    slug        = models.SlugField(max_length=255, unique=True)
    description = models.TextField(null=True, blank=True)
    category    = models.ForeignKey(CategoryModel, db_column="categoryId", related_name="products", on_delete=models.PROTECT)
    basePrice   = models.DecimalField(max_digits=12, decimal_places=2)
    salePrice   = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    costPrice   = models.DecimalField(max_digits=12, decimal_places=2, null=True, blank=True)
    stock       = models.IntegerField(default=0)
    sku         = models.CharField(max_length=100, unique=True, null=True, blank=True)
    featuredType = models.CharField(
        max_length=10,
        choices=[(featured.value, featured.name.title()) for featured in FEATURED_TYPE],
        null=True,
        blank=True,
    )
    hasVariants = models.BooleanField(default=False)
    metaTitle   = models.CharField(max_length=255, null=True, blank=True)
    metaDescription = models.TextField(null=True, blank=True)
    metaKeywords = models.TextField(null=True, blank=True)
    weight      = models.DecimalField(max_digits=10, decimal_places=2, null=True, blank=True)
    dimensions  = models.CharField(max_length=100, null=True, blank=True)
    createdAt   = models.DateTimeField(auto_now_add=True)
    updatedAt   = models.DateTimeField(auto_now=True)

    @property
    def primary_image(self):
        """First image flagged as primary, falling back to the first by position."""
        images = list(self.images.all())
        for image in images:
            if image.isPrimary:
                return image
        return images[0] if images else None

    def __str__(self):
        return self.name

    class Meta:
        db_table = "product"  # Overwrites the default table name
        constraints = [
            CheckConstraint(
                condition=Q(basePrice__gte=0),
                name="product_base_price_min_0"
            )
        ]
