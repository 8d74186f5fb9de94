from .pricing_service import PricingService
