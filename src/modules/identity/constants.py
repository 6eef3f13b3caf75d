"""Identity constants."""

from django.db import models


class ActorRole(models.TextChoices):
    CUSTOMER = "customer", "Customer"
    PARTNER = "partner", "Print-shop partner"


LEDGER_KEY = "all_orders"
