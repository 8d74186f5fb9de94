from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.decorators import action

from base.abstractModels import PagedList
from api.permissions import IsAdminRole
from api.serializers import (
    OrderSerializer, ListOrderSerializer, OrderStatusSerializer, OrderQuerySerializer, DateRangeSerializer
)
from api.services import OrderService, OrderAdminService, ORDER_NOT_FOUND


class OrderViewSet(viewsets.ViewSet):
    """
    Admin order management. Every action requires the admin role and the
    permission check runs before any order is looked up.
    """
    permission_classes = [IsAdminRole]
    order_service = OrderService()
    admin_service = OrderAdminService()

    def list(self, request):
        """
        Retrieve orders with filtering and pagination, newest first.
        GET /api/order
        Optional query params:
        - search (string): matches order id, customer name or mobile e.g. ?search=0171
        - status (ORDER_STATUS): Order status e.g. ?status=PENDING
        - page (int): Page number
        - limit (int): Number of items per page (max 100)
        """
        query = OrderQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return Response(query.errors, status=status.HTTP_400_BAD_REQUEST)

        orders = self.admin_service.list_orders(query.to_dto())

        paginator = PagedList()
        page = paginator.paginate_queryset(orders, request)

        serializer = ListOrderSerializer(page, many=True)
        return paginator.get_paginated_response(serializer.data)

    def retrieve(self, request, pk=None):
        """
        Retrieve a specific order by ID with order items.
        GET /api/order/{id}
        """
        order = self.admin_service.get_order(pk)
        if order is None:
            return Response({"error": "Order not found"}, status=status.HTTP_404_NOT_FOUND)

        return Response(OrderSerializer(order).data)

    @action(detail=True, methods=["post"], url_path="status")
    def update_status(self, request, pk=None):
        """
        Change the status of an order.
        POST /api/order/{id}/status
        Body:
        {
            "status": "PENDING" | "PROCESSING" | "SHIPPED" | "DELIVERED" | "CANCELLED"
        }
        Setting DELIVERED also marks the order as PAID.
        """
        serializer = OrderStatusSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        result = self.order_service.update_status(pk, serializer.validated_data["status"])
        if not result.success:
            code = status.HTTP_404_NOT_FOUND if result.error == ORDER_NOT_FOUND else status.HTTP_400_BAD_REQUEST
            return Response({"error": result.error}, status=code)

        return Response(OrderSerializer(result.data).data)

    @action(detail=False, methods=["get"], url_path="statistics")
    def statistics(self, request):
        """
        Order counts per status, revenue (cancelled orders excluded) and
        product count for the dashboard.
        GET /api/order/statistics
        """
        return Response(self.admin_service.get_statistics())

    @action(detail=False, methods=["get"], url_path="analytics")
    def analytics(self, request):
        """
        Daily sales between two dates (inclusive), cancelled orders excluded.
        GET /api/order/analytics?startDate=2025-01-01&endDate=2025-01-31
        """
        date_range = DateRangeSerializer(data=request.query_params)
        if not date_range.is_valid():
            return Response(date_range.errors, status=status.HTTP_400_BAD_REQUEST)

        return Response(self.admin_service.get_sales_analytics(date_range.to_dto()))

    @action(detail=False, methods=["get"], url_path="top-products")
    def top_products(self, request):
        """
        Best selling products by quantity.
        GET /api/order/top-products?limit=5
        """
        try:
            limit = min(max(int(request.query_params.get("limit", 5)), 1), 50)
        except ValueError:
            return Response({"error": "limit must be an integer"}, status=status.HTTP_400_BAD_REQUEST)

        return Response(self.admin_service.get_top_selling_products(limit))
