from .cart_view import CartViewSet
from .checkout_view import CheckoutViewSet
from .delivery_view import DeliveryViewSet
from .order_view import OrderViewSet
from .product_view import ProductViewSet
from .category_view import CategoryViewSet
from .banner_view import BannerViewSet
