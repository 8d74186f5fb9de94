from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from api.permissions import IsAdminRole
from api.serializers import DeliveryCostSerializer, UpdateDeliveryCostSerializer
from api.services import DeliveryService


class DeliveryViewSet(viewsets.ViewSet):
    delivery_service = DeliveryService()

    def get_permissions(self):
        if self.action in ["update_cost", "initialize"]:
            return [IsAdminRole()]

        return [AllowAny()]

    def list(self, request):
        """
        Delivery cost of every zone.
        GET /api/delivery
        """
        costs = self.delivery_service.list_costs()
        return Response(DeliveryCostSerializer(costs, many=True).data)

    @action(detail=False, methods=["put"], url_path="cost")
    def update_cost(self, request):
        """
        Set the delivery cost of a zone.
        PUT /api/delivery/cost
        Body:
        {
            "zone": "INSIDE_DHAKA" | "OUTSIDE_DHAKA",
            "cost": decimal (> 0)
        }
        """
        serializer = UpdateDeliveryCostSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        result = self.delivery_service.update_cost(
            serializer.validated_data["zone"], serializer.validated_data["cost"]
        )
        if not result.success:
            return Response({"error": result.error}, status=status.HTTP_400_BAD_REQUEST)

        return Response(DeliveryCostSerializer(result.data).data)

    @action(detail=False, methods=["post"], url_path="initialize")
    def initialize(self, request):
        """
        Create the default costs for zones that have none.
        POST /api/delivery/initialize
        """
        created = self.delivery_service.initialize()
        return Response({"created": created})
