import logging
from decimal import Decimal

from django.db import DEFAULT_DB_ALIAS

from base import Constants
from base.enums import DELIVERY_ZONE
from base.models import DeliveryCostModel
from base.results import ActionResult

logger = logging.getLogger(__name__)

VALID_ZONES = [zone.value for zone in DELIVERY_ZONE]


class DeliveryService:
    """Flat delivery costs per zone."""

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using

    def initialize(self):
        """
        Create the rows for zones that have none, using the default costs.
        Existing rows keep their cost, so this can run any number of times.

        Returns:
            list[str]: The zones that were created.
        """
        created_zones = []
        for zone in VALID_ZONES:
            _, created = DeliveryCostModel.objects.using(self.using).get_or_create(
                zone=zone,
                defaults={"cost": Constants.DEFAULT_DELIVERY_COSTS[zone]},
            )
            if created:
                created_zones.append(zone)

        if created_zones:
            logger.info(f"Initialized delivery costs for {', '.join(created_zones)}")
        return created_zones

    def get_cost(self, zone):
        """
        Look up the delivery cost of `zone`.

        A zone without a row is a configuration problem, it is reported
        rather than replaced by a default.

        Returns:
            ActionResult: `data` is the cost as a Decimal.
        """
        if zone not in VALID_ZONES:
            return ActionResult.fail("Invalid delivery zone")

        delivery_cost = DeliveryCostModel.objects.using(self.using).filter(zone=zone).first()
        if delivery_cost is None:
            logger.error(f"No delivery cost configured for zone {zone}")
            return ActionResult.fail("Invalid delivery zone")

        return ActionResult.ok(delivery_cost.cost)

    def list_costs(self):
        self.initialize()
        return list(DeliveryCostModel.objects.using(self.using).order_by("zone"))

    def update_cost(self, zone, cost):
        """
        Set the cost of `zone`, creating its row if needed.

        Returns:
            ActionResult: `data` is the DeliveryCostModel.
        """
        if zone not in VALID_ZONES:
            return ActionResult.fail("Invalid delivery zone")

        cost = Decimal(cost)
        if cost <= 0:
            return ActionResult.fail("Delivery cost must be positive")

        delivery_cost, _ = DeliveryCostModel.objects.using(self.using).update_or_create(
            zone=zone,
            defaults={"cost": cost},
        )
        logger.info(f"Delivery cost for {zone} set to {cost}")
        return ActionResult.ok(delivery_cost)
