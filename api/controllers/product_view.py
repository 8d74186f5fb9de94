from django.shortcuts import get_object_or_404

from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny

from base.abstractModels import PagedList
from base.enums import FEATURED_TYPE
from base.models import ProductModel
from base.utils import parse_uuid
from api.permissions import IsAdminRole
from api.serializers import (
    ProductModelSerializer, ProductDetailSerializer, ProductListSerializer, ProductQuerySerializer
)
from api.services import ProductService

class ProductViewSet(viewsets.ViewSet):
    """
    A ViewSet for the ProductModel. Reads are public, writes need the admin role.
    """
    product_service = ProductService()

    def get_permissions(self):
        if self.action in ["create", "update", "partial_update", "destroy"]:
            return [IsAdminRole()]

        return [AllowAny()]

    def list(self, request):
        """
        GET /api/product
        Optional query params:
        - page (int)
        - limit (int, max 100)
        - search (string) matches name, description or sku e.g. ?search=shirt
        - categoryId (uuid)
        - featuredType (LATEST | HOT | POPULAR)
        - minPrice / maxPrice (decimal) on the base price
        - hasVariants (bool)
        - sortBy (createdAt | name | basePrice | updatedAt), default createdAt
        - sortOrder (asc | desc), default desc
        """
        query = ProductQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return Response(query.errors, status=status.HTTP_400_BAD_REQUEST)

        products = self.product_service.list_products(query.to_dto())

        paginator = PagedList()
        page = paginator.paginate_queryset(products, request)

        serializer = ProductListSerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)

    def retrieve(self, request, pk=None):
        """
        GET /api/product/{id or slug}
        The product with its images, variant options and active variants,
        plus total stock and price range. Cost prices are only shown to admins.
        """
        product = self.product_service.get_product(pk)
        if product is None:
            return Response({"error": "Product not found"}, status=status.HTTP_404_NOT_FOUND)

        if IsAdminRole().has_permission(request, self):
            data = ProductModelSerializer(product).data
        else:
            data = ProductDetailSerializer(product).data
        data["totalStock"] = self.product_service.get_total_stock(product)
        price_range = self.product_service.get_price_range(product)
        data["priceRange"] = {key: str(value) for key, value in price_range.items()} if price_range else None
        return Response(data)

    @action(detail=False, methods=["get"], url_path="featured")
    def featured(self, request):
        """
        GET /api/product/featured?type=HOT&limit=10
        """
        featured_type = request.query_params.get("type", FEATURED_TYPE.LATEST.value)
        if featured_type not in [featured.value for featured in FEATURED_TYPE]:
            return Response({"error": "Invalid featured type"}, status=status.HTTP_400_BAD_REQUEST)

        try:
            limit = min(max(int(request.query_params.get("limit", 10)), 1), 50)
        except ValueError:
            return Response({"error": "limit must be an integer"}, status=status.HTTP_400_BAD_REQUEST)

        products = self.product_service.get_featured(featured_type, limit)
        return Response(ProductListSerializer(products, many=True).data)

    @action(detail=True, methods=["get"], url_path="in-stock")
    def in_stock(self, request, pk=None):
        """
        GET /api/product/{id}/in-stock?variantId=uuid
        """
        product = get_object_or_404(ProductModel, id=parse_uuid(pk))
        variant_id = request.query_params.get("variantId")
        return Response({"inStock": self.product_service.is_in_stock(product, variant_id)})

    def create(self, request):
        """
        POST /api/product
        Body: the product fields with optional nested lists
        {
            "name": string, "slug": string, "categoryId": uuid,
            "basePrice": decimal, "stock": integer, "hasVariants": bool, ...,
            "images": [{"url", "alt", "position", "isPrimary"}],
            "variantOptions": [{"name", "values": [string]}],
            "variants": [{"sku", "name", "options", "price", "stock", "isActive", ...}]
        }
        """
        serializer = ProductModelSerializer(data=request.data)
        if serializer.is_valid():
            serializer.save()
            return Response(serializer.data, status=status.HTTP_201_CREATED)

        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    def update(self, request, pk=None):
        """
        PUT /api/product/{id}
        """
        return self._update(request, pk, partial=False)

    def partial_update(self, request, pk=None):
        """
        PATCH /api/product/{id}
        """
        return self._update(request, pk, partial=True)

    def _update(self, request, pk, partial):
        product = get_object_or_404(ProductModel, id=parse_uuid(pk))
        serializer = ProductModelSerializer(product, data=request.data, partial=partial)
        if serializer.is_valid():
            serializer.save()
            return Response(serializer.data)

        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    def destroy(self, request, pk=None):
        """
        DELETE /api/product/{id}
        """
        product = get_object_or_404(ProductModel, id=parse_uuid(pk))
        product.delete()
        return Response(status=status.HTTP_204_NO_CONTENT)
