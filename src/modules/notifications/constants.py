"""Notification constants and message templates."""

from django.db import models


class NotificationType(models.TextChoices):
    ORDER_CREATED = "order_created", "Order created"
    STATUS_UPDATE = "status_update", "Status update"
    ORDER_UPDATED = "order_updated", "Order updated"


ORDER_CREATED_TITLE = "Order Placed Successfully"
ORDER_CREATED_MESSAGE = "Your order {order_number} has been placed at {shop_name}"

STATUS_UPDATE_TITLE = "Order {order_number} Status Updated"
STATUS_UPDATE_MESSAGE = "Your order status has been updated to {status_label}"

ORDER_UPDATED_TITLE = "Order {order_number} Status Updated"
ORDER_UPDATED_MESSAGE = "You updated order status to {status_label}"
