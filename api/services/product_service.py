from django.db import DEFAULT_DB_ALIAS
from django.db.models import Prefetch, Q

from base.models import ProductModel, ProductVariantModel
from base.utils import parse_uuid


SORTABLE_FIELDS = ["createdAt", "name", "basePrice", "updatedAt"]


class ProductService:
    """Catalog queries used by the storefront and the admin product list."""

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using

    def _products(self):
        active_variants = ProductVariantModel.objects.using(self.using).filter(isActive=True)
        return (
            ProductModel.objects.using(self.using)
            .select_related("category")
            .prefetch_related("images", Prefetch("variants", queryset=active_variants))
        )

    def list_products(self, query):
        """
        Products matching a ProductQuery, sorted by `sortBy`/`sortOrder`.
        Search looks at name, description and sku.
        """
        products = self._products()

        if query.search:
            products = products.filter(
                Q(name__icontains=query.search)
                | Q(description__icontains=query.search)
                | Q(sku__icontains=query.search)
            )
        if query.categoryId:
            products = products.filter(category_id=query.categoryId)
        if query.featuredType:
            products = products.filter(featuredType=query.featuredType)
        if query.minPrice is not None:
            products = products.filter(basePrice__gte=query.minPrice)
        if query.maxPrice is not None:
            products = products.filter(basePrice__lte=query.maxPrice)
        if query.hasVariants is not None:
            products = products.filter(hasVariants=query.hasVariants)

        sort_by = query.sortBy if query.sortBy in SORTABLE_FIELDS else "createdAt"
        prefix = "" if query.sortOrder == "asc" else "-"
        # id as a tie breaker keeps pages stable
        return products.order_by(f"{prefix}{sort_by}", "id")

    def get_product(self, id_or_slug):
        """
        Look a product up by id, or by slug when the value is not a UUID.
        Only active variants are loaded.
        """
        product_id = parse_uuid(id_or_slug)
        lookup = {"id": product_id} if product_id else {"slug": id_or_slug}
        return (
            self._products()
            .prefetch_related("variantOptions")
            .filter(**lookup)
            .first()
        )

    def get_featured(self, featured_type, limit=10):
        return list(
            self._products()
            .filter(featuredType=featured_type)
            .order_by("-createdAt")[:limit]
        )

    @staticmethod
    def get_total_stock(product):
        """Product stock, or the summed stock of its active variants."""
        if not product.hasVariants:
            return product.stock
        return sum(variant.stock for variant in product.variants.all() if variant.isActive)

    @staticmethod
    def get_price_range(product):
        """
        Lowest and highest effective unit price a shopper can pay for the
        product. None for a variant product without active variants.
        """
        if not product.hasVariants:
            price = product.salePrice if product.salePrice is not None else product.basePrice
            return {"min": price, "max": price}

        prices = [
            variant.salePrice if variant.salePrice is not None else variant.price
            for variant in product.variants.all()
            if variant.isActive
        ]
        if not prices:
            return None
        return {"min": min(prices), "max": max(prices)}

    def is_in_stock(self, product, variant_id=None):
        if variant_id:
            variant = (
                ProductVariantModel.objects.using(self.using)
                .filter(id=parse_uuid(variant_id), product=product)
                .first()
            )
            return bool(variant and variant.isActive and variant.stock > 0)

        return self.get_total_stock(product) > 0
