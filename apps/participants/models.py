from django.db import models


class Participant(models.Model):
    """Person in the coffee rotation."""

    name = models.CharField(max_length=200, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    # Relative rank only; values need not be contiguous.
    order_position = models.IntegerField(default=0)

    class Meta:
        db_table = 'participants'
        indexes = [
            models.Index(fields=['order_position'], name='participants_order_idx'),
        ]
        ordering = ['order_position', 'id']

    def __str__(self):
        return f"{self.name} (#{self.order_position})"

    def has_purchases(self):
        return self.coffee_purchases.exists()


class ReorderHistoryEntry(models.Model):
    """Before/after snapshot of one rotation reorder."""

    timestamp = models.DateTimeField(auto_now_add=True)
    old_order = models.JSONField(default=list)
    new_order = models.JSONField(default=list)

    class Meta:
        db_table = 'reorder_history'
        ordering = ['-id']
        verbose_name_plural = 'reorder history entries'

    def __str__(self):
        return f"Reorder {self.id} at {self.timestamp:%Y-%m-%d %H:%M}"
