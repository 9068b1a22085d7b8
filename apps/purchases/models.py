from django.db import models
from django.utils import timezone


class PurchaseKind(models.TextChoices):
    COFFEE = 'coffee', 'Participant purchase'
    EXTERNAL = 'external', 'External purchase'


class CoffeePurchase(models.Model):
    """Coffee bought by a participant in the rotation."""

    # PROTECT: purchase history blocks participant deletion
    participant = models.ForeignKey(
        'participants.Participant',
        on_delete=models.PROTECT,
        related_name='coffee_purchases'
    )
    purchase_date = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'coffee_purchases'
        indexes = [
            models.Index(fields=['purchase_date'], name='coffee_purchase_date_idx'),
        ]
        ordering = ['-purchase_date', '-id']

    def __str__(self):
        return f"{self.participant.name} - {self.purchase_date:%Y-%m-%d %H:%M}"


class ExternalPurchase(models.Model):
    """Coffee bought by someone outside the rotation. Never affects turn order."""

    name = models.CharField(max_length=200)
    purchase_date = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = 'external_purchases'
        indexes = [
            models.Index(fields=['purchase_date'], name='external_purchase_date_idx'),
        ]
        ordering = ['-purchase_date', '-id']

    def __str__(self):
        return f"{self.name} (external) - {self.purchase_date:%Y-%m-%d %H:%M}"
