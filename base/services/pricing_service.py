from decimal import Decimal


class PricingService:
    """
    Price arithmetic shared by the cart summary and checkout.

    Works on anything shaped like a cart item: `product`, `variant` (or None)
    and `quantity`. All amounts are Decimal.
    """

    @staticmethod
    def effective_unit_price(item):
        """
        Price a single unit of a cart item.

        A selected variant prices the item on its own: its salePrice when set,
        otherwise its price. The product's prices are only used for items
        without a variant, salePrice again taking precedence over basePrice.
        """
        variant = item.variant
        if variant is not None:
            return variant.salePrice if variant.salePrice is not None else variant.price

        product = item.product
        return product.salePrice if product.salePrice is not None else product.basePrice

    @classmethod
    def line_total(cls, item):
        return cls.effective_unit_price(item) * item.quantity

    @classmethod
    def calculate_subtotal(cls, items):
        """
        Sum of unit price times quantity over `items`.

        Args:
            items (iterable): Cart items.

        Returns:
            Decimal: The subtotal, Decimal("0") for no items.
        """
        return sum((cls.line_total(item) for item in items), Decimal("0"))

    @staticmethod
    def calculate_total(subtotal, delivery_cost):
        return subtotal + delivery_cost
