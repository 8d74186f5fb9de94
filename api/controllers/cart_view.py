from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from api.serializers import AddCartItemSerializer, UpdateCartItemSerializer, CartSerializer, CartItemSerializer
from api.services import CartService

EMPTY_CART = {"id": None, "items": [], "itemCount": 0, "subtotal": "0.00"}


class CartViewSet(viewsets.ViewSet):
  """
  The guest cart. The cart belongs to the guest session set up by
  GuestSessionMiddleware, there is no cart id in the URL.
  """
  permission_classes = [AllowAny]
  cart_service = CartService()

  def list(self, request):
    """
    GET /api/cart
    get the cart of the current guest session with its items, newest first
    """
    cart = self.cart_service.get_cart(request.guest_token)
    if cart is None:
      return Response(EMPTY_CART)

    return Response(CartSerializer(cart).data)

  @action(detail=False, methods=["get"], url_path="summary")
  def summary(self, request):
    """
    GET /api/cart/summary
    item count and subtotal, for the cart badge
    """
    summary = self.cart_service.get_summary(request.guest_token)
    return Response({"itemCount": summary["itemCount"], "subtotal": str(summary["subtotal"])})

  def create(self, request):
    """
    POST /api/cart
    add a product, or one of its variants, to the cart
    Body:
    {
      "productId": uuid,
      "variantId": uuid (required for products with variants),
      "quantity": integer (1-99, default 1)
    }
    """
    serializer = AddCartItemSerializer(data=request.data)
    if not serializer.is_valid():
      return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    data = serializer.validated_data
    result = self.cart_service.add_item(
      request.guest_token,
      data["productId"],
      data.get("variantId"),
      data["quantity"],
    )
    if not result.success:
      return Response({"error": result.error}, status=status.HTTP_400_BAD_REQUEST)

    return Response(CartItemSerializer(result.data).data, status=status.HTTP_201_CREATED)

  def update(self, request, pk=None):
    """
    PUT /api/cart/{itemId}
    set the quantity of a cart item, a quantity below 1 removes it
    Body:
    {
      "quantity": integer
    }
    """
    serializer = UpdateCartItemSerializer(data=request.data)
    if not serializer.is_valid():
      return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    result = self.cart_service.update_quantity(request.guest_token, pk, serializer.validated_data["quantity"])
    if not result.success:
      return Response({"error": result.error}, status=status.HTTP_404_NOT_FOUND)

    if result.data is None:
      return Response(status=status.HTTP_204_NO_CONTENT)
    return Response(CartItemSerializer(result.data).data)

  def destroy(self, request, pk=None):
    """
    DELETE /api/cart/{itemId}
    remove an item from the cart
    """
    result = self.cart_service.remove_item(request.guest_token, pk)
    if not result.success:
      return Response({"error": result.error}, status=status.HTTP_404_NOT_FOUND)

    return Response(status=status.HTTP_204_NO_CONTENT)

  @action(detail=False, methods=["delete"], url_path="clear")
  def clear(self, request):
    """
    DELETE /api/cart/clear
    remove every item from the cart
    """
    result = self.cart_service.clear_cart(request.guest_token)
    if not result.success:
      return Response({"error": result.error}, status=status.HTTP_400_BAD_REQUEST)

    return Response(status=status.HTTP_204_NO_CONTENT)
