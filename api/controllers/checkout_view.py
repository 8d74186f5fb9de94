from rest_framework import viewsets, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from api.serializers import CheckoutSerializer
from api.services import OrderService


class CheckoutViewSet(viewsets.ViewSet):
    permission_classes = [AllowAny]
    order_service = OrderService()

    def create(self, request):
        """
        Place a cash-on-delivery order from the guest cart.
        POST /api/checkout
        Body:
        {
            "customerName": string (min 2),
            "customerMobile": string (min 11),
            "customerAddress": string (min 10),
            "deliveryZone": "INSIDE_DHAKA" | "OUTSIDE_DHAKA"
        }
        Returns 201 {"orderId": string}
        """
        serializer = CheckoutSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        result = self.order_service.place_order(request.guest_token, serializer.to_dto())
        if not result.success:
            return Response({"error": result.error}, status=status.HTTP_400_BAD_REQUEST)

        return Response(result.data, status=status.HTTP_201_CREATED)
