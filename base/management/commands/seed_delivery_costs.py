from django.core.management.base import BaseCommand
from django.db import DEFAULT_DB_ALIAS, connections

from api.services import DeliveryService

class Command(BaseCommand):
    help = "Creates the default delivery cost of every zone that has none. Existing costs are kept."

    def add_arguments(self, parser):
        parser.add_argument("--database", default=DEFAULT_DB_ALIAS, help="Database alias to seed.")

    def handle(self, *args, **options):
        database = options["database"]
        try:
            connections[database].ensure_connection()
            self.stdout.write("Database connection successfully established.")
        except Exception as e:
            self.stdout.write(self.style.ERROR(f"Failed to connect to database: {e}"))
            return

        created = DeliveryService(using=database).initialize()
        if created:
            self.stdout.write(self.style.SUCCESS(f"Created delivery costs for: {', '.join(created)}"))
        else:
            self.stdout.write(self.style.SUCCESS("Delivery costs already initialized."))
