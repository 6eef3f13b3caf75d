"""Base abstract model and the durable record store table.

Provides:
- ``BaseModel``: UUIDv7 primary key + created_at / updated_at timestamps.
- ``StoredRecord``: one serialized collection per scope key.  The engines
  never query inside ``value``; it is an opaque text payload written and
  read as a whole.
"""

from __future__ import annotations

import uuid6
from django.db import models

# ---------------------------------------------------------------------------
# BaseModel
# ---------------------------------------------------------------------------


class BaseModel(models.Model):
    """Abstract base with UUIDv7 PK and timestamp bookkeeping."""

    id = models.UUIDField(
        primary_key=True,
        default=uuid6.uuid7,
        editable=False,
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs) -> None:
        """Ensure ``updated_at`` is refreshed even when ``update_fields`` is passed."""
        update_fields = kwargs.get("update_fields")
        if update_fields is not None and "updated_at" not in update_fields:
            kwargs["update_fields"] = list(update_fields) + ["updated_at"]
        super().save(*args, **kwargs)


# ---------------------------------------------------------------------------
# Key-value record store
# ---------------------------------------------------------------------------


class StoredRecord(BaseModel):
    """A serialized collection stored under a deterministic scope key.

    Keys look like ``orders_<actorId>``, ``partner_orders_<actorEmail>``
    or ``all_orders``.
    """

    key = models.CharField(max_length=255, unique=True)
    value = models.TextField()

    class Meta:
        db_table = "stored_records"
        ordering = ["key"]

    def __str__(self) -> str:
        return f"{self.key} ({len(self.value)} chars)"
