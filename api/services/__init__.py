from .guest_session_service import GuestSessionService
from .cart_service import CartService
from .delivery_service import DeliveryService
from .order_service import OrderService, InsufficientStockError, ORDER_NOT_FOUND
from .order_admin_service import OrderAdminService
from .product_service import ProductService
