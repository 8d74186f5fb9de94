from django.db.models import ProtectedError
from django.shortcuts import get_object_or_404

from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.permissions import AllowAny

from base.abstractModels import PagedList
from base.models import CategoryModel
from base.utils import parse_uuid

from api.permissions import IsAdminRole
from api.serializers import CategorySerializer

class CategoryViewSet(viewsets.ViewSet):
    """
    A ViewSet for the CategoryModel that provides full CRUD operations
    """
    def get_permissions(self):
        if self.action in ["create", "update", "partial_update", "destroy"]:
            return [IsAdminRole()]

        return [AllowAny()]

    def list(self, request):
        """
        Retrieve CategoryModel records, newest first.
        GET /api/category
        Optional query params:
        - page (int), limit (int) to paginate, otherwise all categories are returned
        """
        categories = CategoryModel.objects.order_by("-createdAt")

        if "page" in request.query_params or "limit" in request.query_params:
            paginator = PagedList()
            page = paginator.paginate_queryset(categories, request)
            return paginator.get_paginated_response(CategorySerializer(page, many=True).data)

        return Response(CategorySerializer(categories, many=True).data)

    def retrieve(self, request, pk=None):
        """
        Retrieve a specific CategoryModel record by ID or slug.
        GET /api/category/{id or slug}
        """
        category = CategoryModel.objects.filter(slug=pk).first()
        if category is None:
            category = get_object_or_404(CategoryModel, id=parse_uuid(pk))
        return Response(CategorySerializer(category).data)

    def create(self, request):
        """
        POST /api/category
        Body:
        {
            "name": string,
            "slug": string (lowercase kebab-case)
        }
        """
        serializer = CategorySerializer(data=request.data)
        if serializer.is_valid():
            serializer.save()
            return Response(serializer.data, status=status.HTTP_201_CREATED)

        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    def update(self, request, pk=None):
        """
        PUT /api/category/{id}
        """
        category = get_object_or_404(CategoryModel, id=parse_uuid(pk))
        serializer = CategorySerializer(category, data=request.data, partial=True)
        if serializer.is_valid():
            serializer.save()
            return Response(serializer.data)

        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    def destroy(self, request, pk=None):
        """
        DELETE /api/category/{id}
        Categories that still have products cannot be deleted.
        """
        category = get_object_or_404(CategoryModel, id=parse_uuid(pk))
        try:
            category.delete()
        except ProtectedError:
            return Response(
                {"error": "Category has products and cannot be deleted"},
                status=status.HTTP_400_BAD_REQUEST
            )

        return Response(status=status.HTTP_204_NO_CONTENT)
