from .user_model import UserModel
from .guest_session_model import GuestSessionModel
from .category_model import CategoryModel
from .product_model import ProductModel
from .product_image_model import ProductImageModel
from .variant_option_model import VariantOptionModel
from .product_variant_model import ProductVariantModel
from .banner_model import BannerModel
from .delivery_cost_model import DeliveryCostModel
from .cart_model import CartModel
from .cart_item_model import CartItemModel
from .order_model import OrderModel
from .order_item_model import OrderItemModel
