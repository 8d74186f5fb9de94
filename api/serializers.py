from decimal import Decimal

from django.db import transaction
from rest_framework import serializers
from rest_framework.validators import UniqueValidator

from base import Constants
from base.dtos import CheckoutDetails, OrderQuery, ProductQuery, DateRange
from base.enums import DELIVERY_ZONE, FEATURED_TYPE, ORDER_STATUS
from base.models import *

"""
Serializers for the corresponding models.
Converts model instances to and from JSON format for API interactions.
Request-only serializers turn validated input into the frozen values in base.dtos.
"""

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"
MIN_PRICE = Decimal("0.01")


def money_field(**kwargs):
    return serializers.DecimalField(max_digits=12, decimal_places=2, **kwargs)


class UserModelSerializer(serializers.ModelSerializer):
    isActive = serializers.BooleanField(source="is_active", read_only=True)
    isStaff = serializers.BooleanField(source="is_staff", read_only=True)

    class Meta:
        model = UserModel
        fields = ["id", "username", "email", "name", "role", "isActive", "isStaff"]
        read_only_fields = fields


class CategorySerializer(serializers.ModelSerializer):
    slug = serializers.RegexField(SLUG_PATTERN, max_length=100, validators=[UniqueValidator(queryset=CategoryModel.objects.all())])

    class Meta:
        model = CategoryModel
        fields = ["id", "name", "slug", "createdAt", "updatedAt"]
        read_only_fields = ["id", "createdAt", "updatedAt"]


class BannerSerializer(serializers.ModelSerializer):
    class Meta:
        model = BannerModel
        fields = ["id", "imageUrl", "linkUrl", "position", "isActive", "createdAt", "updatedAt"]
        read_only_fields = ["id", "createdAt", "updatedAt"]


class ProductImageSerializer(serializers.ModelSerializer):
    url = serializers.URLField(max_length=1000)

    class Meta:
        model = ProductImageModel
        fields = ["id", "url", "alt", "position", "isPrimary"]
        read_only_fields = ["id"]


class VariantOptionSerializer(serializers.ModelSerializer):
    values = serializers.ListField(child=serializers.CharField(), min_length=1)

    class Meta:
        model = VariantOptionModel
        fields = ["id", "name", "values"]
        read_only_fields = ["id"]


class ProductVariantSerializer(serializers.ModelSerializer):
    # Writable so that updates can tell existing variants from new ones
    id = serializers.UUIDField(required=False)
    price = money_field(min_value=MIN_PRICE)
    salePrice = money_field(min_value=MIN_PRICE, required=False, allow_null=True)
    costPrice = money_field(min_value=MIN_PRICE, required=False, allow_null=True)
    stock = serializers.IntegerField(min_value=0)

    class Meta:
        model = ProductVariantModel
        fields = ["id", "sku", "name", "options", "price", "salePrice", "costPrice", "stock", "imageUrl", "isActive"]
        # Nested under a product the validator has no instance to exclude,
        # ProductModelSerializer checks SKUs across the whole list instead
        extra_kwargs = {"sku": {"validators": []}}


class PublicProductVariantSerializer(serializers.ModelSerializer):
    """Storefront view of a variant, without the cost price."""
    class Meta:
        model = ProductVariantModel
        fields = ["id", "sku", "name", "options", "price", "salePrice", "stock", "imageUrl", "isActive"]
        read_only_fields = fields


class CategorySummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = CategoryModel
        fields = ["id", "name", "slug"]


class ProductListSerializer(serializers.ModelSerializer):
    """Compact product for listings: primary image and active variants only."""
    category = CategorySummarySerializer(read_only=True)
    primaryImage = ProductImageSerializer(source="primary_image", read_only=True)
    variants = PublicProductVariantSerializer(many=True, read_only=True)

    class Meta:
        model = ProductModel
        fields = [
            "id", "name", "slug", "category", "basePrice", "salePrice", "stock", "sku",
            "featuredType", "hasVariants", "primaryImage", "variants", "createdAt", "updatedAt"
        ]


class ProductDetailSerializer(serializers.ModelSerializer):
    """Storefront product page: images, variant options and variants, no cost prices."""
    category = CategorySummarySerializer(read_only=True)
    images = ProductImageSerializer(many=True, read_only=True)
    variantOptions = VariantOptionSerializer(many=True, read_only=True)
    variants = PublicProductVariantSerializer(many=True, read_only=True)

    class Meta:
        model = ProductModel
        fields = [
            "id", "name", "slug", "description", "category",
            "basePrice", "salePrice", "stock", "sku", "featuredType", "hasVariants",
            "metaTitle", "metaDescription", "metaKeywords", "weight", "dimensions",
            "images", "variantOptions", "variants", "createdAt", "updatedAt"
        ]
        read_only_fields = fields


class ProductModelSerializer(serializers.ModelSerializer):
    """
    Full product with images, variant options and variants.
    Admin writes may include the nested lists; a nested list that is sent
    replaces the stored one, a list that is left out is not touched.
    """
    slug = serializers.RegexField(SLUG_PATTERN, max_length=255, validators=[UniqueValidator(queryset=ProductModel.objects.all())])
    category = CategorySummarySerializer(read_only=True)
    categoryId = serializers.PrimaryKeyRelatedField(
        source="category", queryset=CategoryModel.objects.all(), write_only=True
    )
    basePrice = money_field(min_value=MIN_PRICE)
    salePrice = money_field(min_value=MIN_PRICE, required=False, allow_null=True)
    costPrice = money_field(min_value=MIN_PRICE, required=False, allow_null=True)
    stock = serializers.IntegerField(min_value=0)
    featuredType = serializers.ChoiceField(
        choices=[featured.value for featured in FEATURED_TYPE], required=False, allow_null=True
    )
    images = ProductImageSerializer(many=True, required=False)
    variantOptions = VariantOptionSerializer(many=True, required=False)
    variants = ProductVariantSerializer(many=True, required=False)

    class Meta:
        model = ProductModel
        fields = [
            "id", "name", "slug", "description", "category", "categoryId",
            "basePrice", "salePrice", "costPrice", "stock", "sku", "featuredType", "hasVariants",
            "metaTitle", "metaDescription", "metaKeywords", "weight", "dimensions",
            "images", "variantOptions", "variants", "createdAt", "updatedAt"
        ]
        read_only_fields = ["id", "createdAt", "updatedAt"]

    def validate(self, data):
        has_variants = data.get("hasVariants", getattr(self.instance, "hasVariants", False))
        variants = data.get("variants")

        # On update only checked when the variants are part of the request
        if has_variants and (variants is not None or self.instance is None) and not variants:
            raise serializers.ValidationError({"variants": ["A product with variants needs at least one variant."]})

        if variants:
            self._validate_variant_skus(variants)
        return data

    def _validate_variant_skus(self, variants):
        skus = [variant["sku"] for variant in variants if variant.get("sku")]
        repeated = sorted({sku for sku in skus if skus.count(sku) > 1})
        if repeated:
            raise serializers.ValidationError({"variants": [f"SKU {sku} is repeated." for sku in repeated]})

        taken = ProductVariantModel.objects.filter(sku__in=skus)
        if self.instance is not None:
            taken = taken.exclude(product=self.instance)
        in_use = sorted(taken.values_list("sku", flat=True))
        if in_use:
            raise serializers.ValidationError({"variants": [f"SKU {sku} is already in use." for sku in in_use]})

    @transaction.atomic
    def create(self, validated_data):
        images = validated_data.pop("images", [])
        variant_options = validated_data.pop("variantOptions", [])
        variants = validated_data.pop("variants", [])

        product = ProductModel.objects.create(**validated_data)
        self._replace_images(product, images)
        self._replace_variant_options(product, variant_options)
        self._sync_variants(product, variants)
        return product

    @transaction.atomic
    def update(self, instance, validated_data):
        images = validated_data.pop("images", None)
        variant_options = validated_data.pop("variantOptions", None)
        variants = validated_data.pop("variants", None)

        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        instance.save()

        if images is not None:
            self._replace_images(instance, images)
        if variant_options is not None:
            self._replace_variant_options(instance, variant_options)
        if variants is not None:
            self._sync_variants(instance, variants)
        return instance

    @staticmethod
    def _replace_images(product, images):
        product.images.all().delete()
        ProductImageModel.objects.bulk_create(
            [ProductImageModel(product=product, **image) for image in images]
        )

    @staticmethod
    def _replace_variant_options(product, variant_options):
        product.variantOptions.all().delete()
        VariantOptionModel.objects.bulk_create(
            [VariantOptionModel(product=product, **option) for option in variant_options]
        )

    @staticmethod
    def _sync_variants(product, variants):
        """
        Update variants whose id is sent, create the others and delete the
        ones missing from the list. Existing ids keep cart items pointing at
        the same variant. Removed variants go first so their SKUs can be reused.
        """
        sent_ids = [variant_data["id"] for variant_data in variants if variant_data.get("id")]
        product.variants.exclude(id__in=sent_ids).delete()

        for variant_data in variants:
            variant_id = variant_data.pop("id", None)
            variant = product.variants.filter(id=variant_id).first() if variant_id else None
            if variant is None:
                ProductVariantModel.objects.create(product=product, **variant_data)
            else:
                for attr, value in variant_data.items():
                    setattr(variant, attr, value)
                variant.save()


class ProductQuerySerializer(serializers.Serializer):
    search = serializers.CharField(required=False, allow_blank=True)
    categoryId = serializers.UUIDField(required=False)
    featuredType = serializers.ChoiceField(choices=[featured.value for featured in FEATURED_TYPE], required=False)
    minPrice = money_field(min_value=MIN_PRICE, required=False)
    maxPrice = money_field(min_value=MIN_PRICE, required=False)
    hasVariants = serializers.BooleanField(required=False, allow_null=True, default=None)
    sortBy = serializers.ChoiceField(choices=["createdAt", "name", "basePrice", "updatedAt"], default="createdAt")
    sortOrder = serializers.ChoiceField(choices=["asc", "desc"], default="desc")

    def to_dto(self):
        data = dict(self.validated_data)
        if data.get("categoryId"):
            data["categoryId"] = str(data["categoryId"])
        return ProductQuery(**data)


class CartItemProductSerializer(serializers.ModelSerializer):
    primaryImage = ProductImageSerializer(source="primary_image", read_only=True)

    class Meta:
        model = ProductModel
        fields = ["id", "name", "slug", "basePrice", "salePrice", "stock", "hasVariants", "primaryImage"]


class CartItemVariantSerializer(serializers.ModelSerializer):
    class Meta:
        model = ProductVariantModel
        fields = ["id", "sku", "name", "options", "price", "salePrice", "stock", "imageUrl", "isActive"]


class CartItemSerializer(serializers.ModelSerializer):
    product = CartItemProductSerializer(read_only=True)
    variant = CartItemVariantSerializer(read_only=True)
    unitPrice = money_field(read_only=True)
    lineTotal = money_field(read_only=True)

    class Meta:
        model = CartItemModel
        fields = ["id", "product", "variant", "quantity", "unitPrice", "lineTotal", "createdAt", "updatedAt"]


class CartSerializer(serializers.ModelSerializer):
    items = CartItemSerializer(many=True, read_only=True)
    itemCount = serializers.IntegerField(read_only=True)
    subtotal = money_field(read_only=True)

    class Meta:
        model = CartModel
        fields = ["id", "items", "itemCount", "subtotal"]


class AddCartItemSerializer(serializers.Serializer):
    productId = serializers.UUIDField()
    variantId = serializers.UUIDField(required=False, allow_null=True)
    quantity = serializers.IntegerField(
        min_value=Constants.Cart.MIN_QUANTITY,
        max_value=Constants.Cart.MAX_QUANTITY,
        default=1
    )


class UpdateCartItemSerializer(serializers.Serializer):
    # Anything below the minimum removes the item, so only the maximum is enforced here
    quantity = serializers.IntegerField(max_value=Constants.Cart.MAX_QUANTITY)


class CheckoutSerializer(serializers.Serializer):
    customerName = serializers.CharField(min_length=Constants.Checkout.MIN_NAME_LENGTH, max_length=255)
    customerMobile = serializers.CharField(min_length=Constants.Checkout.MIN_MOBILE_LENGTH, max_length=20)
    customerAddress = serializers.CharField(min_length=Constants.Checkout.MIN_ADDRESS_LENGTH)
    deliveryZone = serializers.ChoiceField(choices=[zone.value for zone in DELIVERY_ZONE])

    def to_dto(self):
        return CheckoutDetails(**self.validated_data)


class DeliveryCostSerializer(serializers.ModelSerializer):
    class Meta:
        model = DeliveryCostModel
        fields = ["id", "zone", "cost", "updatedAt"]


class UpdateDeliveryCostSerializer(serializers.Serializer):
    zone = serializers.ChoiceField(choices=[zone.value for zone in DELIVERY_ZONE])
    cost = money_field(min_value=MIN_PRICE)


class OrderItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = OrderItemModel
        fields = ["id", "productId", "variantId", "productName", "variantName", "sku", "productImage", "price", "quantity"]


class ListOrderSerializer(serializers.ModelSerializer):
    itemCount = serializers.IntegerField(read_only=True)

    class Meta:
        model = OrderModel
        fields = [
            "id", "customerName", "customerMobile", "deliveryZone", "totalAmount",
            "status", "paymentStatus", "itemCount", "createdAt"
        ]


class OrderSerializer(serializers.ModelSerializer):
    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = OrderModel
        fields = [
            "id", "customerName", "customerMobile", "customerAddress", "deliveryZone",
            "subtotal", "deliveryCost", "totalAmount", "status", "paymentStatus",
            "items", "createdAt", "updatedAt"
        ]


class OrderStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=[status.value for status in ORDER_STATUS])


class OrderQuerySerializer(serializers.Serializer):
    search = serializers.CharField(required=False, allow_blank=True)
    status = serializers.ChoiceField(choices=[status.value for status in ORDER_STATUS], required=False)

    def to_dto(self):
        return OrderQuery(**self.validated_data)


class DateRangeSerializer(serializers.Serializer):
    startDate = serializers.DateField()
    endDate = serializers.DateField()

    def validate(self, data):
        if data["startDate"] > data["endDate"]:
            raise serializers.ValidationError({"endDate": ["End date must not be before start date."]})
        return data

    def to_dto(self):
        return DateRange(start=self.validated_data["startDate"], end=self.validated_data["endDate"])
