from datetime import datetime, time

from django.db import DEFAULT_DB_ALIAS
from django.db.models import Count, Q, Sum
from django.db.models.functions import TruncDate
from django.utils import timezone

from base.enums import ORDER_STATUS
from base.models import OrderModel, OrderItemModel, ProductModel


class OrderAdminService:
    """Read side of order management for the admin dashboard."""

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using

    def _orders(self):
        return OrderModel.objects.using(self.using)

    def list_orders(self, query):
        """
        Orders matching `query` (OrderQuery), newest first. Search matches the
        order id, customer name or mobile number.
        """
        orders = self._orders().annotate(itemCount=Count("items"))

        if query.search:
            orders = orders.filter(
                Q(id__icontains=query.search)
                | Q(customerName__icontains=query.search)
                | Q(customerMobile__icontains=query.search)
            )
        if query.status:
            orders = orders.filter(status=query.status)

        return orders.order_by("-createdAt")

    def get_order(self, order_id):
        return self._orders().prefetch_related("items").filter(id=order_id).first()

    def get_statistics(self):
        counts = self._orders().aggregate(
            totalOrders=Count("id"),
            pendingOrders=Count("id", filter=Q(status=ORDER_STATUS.PENDING.value)),
            processingOrders=Count("id", filter=Q(status=ORDER_STATUS.PROCESSING.value)),
            shippedOrders=Count("id", filter=Q(status=ORDER_STATUS.SHIPPED.value)),
            deliveredOrders=Count("id", filter=Q(status=ORDER_STATUS.DELIVERED.value)),
            cancelledOrders=Count("id", filter=Q(status=ORDER_STATUS.CANCELLED.value)),
        )
        revenue = (
            self._orders()
            .exclude(status=ORDER_STATUS.CANCELLED.value)
            .aggregate(total=Sum("totalAmount"))["total"]
        )
        counts["totalRevenue"] = revenue or 0
        counts["totalProducts"] = ProductModel.objects.using(self.using).count()
        return counts

    def get_sales_analytics(self, date_range):
        """
        Sales and order count per day between the two dates (inclusive),
        ignoring cancelled orders. Days without orders are left out.
        """
        tz = timezone.get_current_timezone()
        start = timezone.make_aware(datetime.combine(date_range.start, time.min), tz)
        end = timezone.make_aware(datetime.combine(date_range.end, time.max), tz)

        rows = (
            self._orders()
            .filter(createdAt__gte=start, createdAt__lte=end)
            .exclude(status=ORDER_STATUS.CANCELLED.value)
            .annotate(date=TruncDate("createdAt"))
            .values("date")
            .annotate(sales=Sum("totalAmount"), orders=Count("id"))
            .order_by("date")
        )
        return [
            {"date": row["date"].isoformat(), "sales": row["sales"], "orders": row["orders"]}
            for row in rows
        ]

    def get_top_selling_products(self, limit=5):
        rows = (
            OrderItemModel.objects.using(self.using)
            .values("productId", "productName")
            .annotate(quantity=Sum("quantity"))
            .order_by("-quantity")[:limit]
        )
        return [
            {"id": str(row["productId"]), "name": row["productName"], "quantity": row["quantity"] or 0}
            for row in rows
        ]
