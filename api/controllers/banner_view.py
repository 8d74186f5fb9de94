from django.shortcuts import get_object_or_404

from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny

from base.abstractModels import PagedList
from base.models import BannerModel
from base.utils import parse_uuid

from api.permissions import IsAdminRole
from api.serializers import BannerSerializer

class BannerViewSet(viewsets.ViewSet):
    def get_permissions(self):
        if self.action in ["active"]:
            return [AllowAny()]

        return [IsAdminRole()]

    @action(detail=False, methods=["get"], url_path="active")
    def active(self, request):
        """
        Active banners in display order, for the storefront carousel.
        GET /api/banner/active
        """
        banners = BannerModel.objects.filter(isActive=True).order_by("position")
        return Response(BannerSerializer(banners, many=True).data)

    def list(self, request):
        """
        GET /api/banner
        Optional query params:
        - page (int), limit (int)
        - isActive (bool)
        - sortBy (position | createdAt), default position
        """
        banners = BannerModel.objects.all()

        is_active = request.query_params.get("isActive")
        if is_active is not None:
            banners = banners.filter(isActive=is_active.lower() in ["true", "1"])

        sort_by = request.query_params.get("sortBy", "position")
        if sort_by not in ["position", "createdAt"]:
            sort_by = "position"
        banners = banners.order_by(sort_by, "id")

        paginator = PagedList()
        page = paginator.paginate_queryset(banners, request)
        return paginator.get_paginated_response(BannerSerializer(page, many=True).data)

    def retrieve(self, request, pk=None):
        """
        GET /api/banner/{id}
        """
        banner = get_object_or_404(BannerModel, id=parse_uuid(pk))
        return Response(BannerSerializer(banner).data)

    def create(self, request):
        """
        POST /api/banner
        Body:
        {
            "imageUrl": string,
            "linkUrl": string (optional),
            "position": integer (default 0),
            "isActive": bool (default true)
        }
        """
        serializer = BannerSerializer(data=request.data)
        if serializer.is_valid():
            serializer.save()
            return Response(serializer.data, status=status.HTTP_201_CREATED)

        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    def update(self, request, pk=None):
        """
        PUT /api/banner/{id}
        """
        banner = get_object_or_404(BannerModel, id=parse_uuid(pk))
        serializer = BannerSerializer(banner, data=request.data, partial=True)
        if serializer.is_valid():
            serializer.save()
            return Response(serializer.data)

        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    @action(detail=True, methods=["post"], url_path="toggle")
    def toggle(self, request, pk=None):
        """
        Switch a banner between active and inactive.
        POST /api/banner/{id}/toggle
        """
        banner = get_object_or_404(BannerModel, id=parse_uuid(pk))
        banner.isActive = not banner.isActive
        banner.save(update_fields=["isActive", "updatedAt"])
        return Response(BannerSerializer(banner).data)

    def destroy(self, request, pk=None):
        """
        DELETE /api/banner/{id}
        """
        banner = get_object_or_404(BannerModel, id=parse_uuid(pk))
        banner.delete()
        return Response(status=status.HTTP_204_NO_CONTENT)
