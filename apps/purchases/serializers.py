from rest_framework import serializers
from .models import CoffeePurchase, ExternalPurchase


# =============================================================================
# Input Serializers
# =============================================================================

class RecordPurchaseSerializer(serializers.Serializer):
    """
    Validate body for recording a purchase.

    Fields:
        participant_id (int): Roster participant who bought
        buyer_name (str): Free-form name of a non-member who bought

    One of the two is required; the service reports when both are missing.
    """

    participant_id = serializers.IntegerField(min_value=1, required=False, allow_null=True)
    buyer_name = serializers.CharField(
        max_length=200,
        required=False,
        allow_blank=True,
        allow_null=True,
    )


# =============================================================================
# Output Serializers
# =============================================================================

class CoffeePurchaseSerializer(serializers.ModelSerializer):
    """Participant purchase row."""

    is_external = serializers.SerializerMethodField()

    class Meta:
        model = CoffeePurchase
        fields = ['id', 'participant_id', 'purchase_date', 'is_external']
        read_only_fields = fields

    def get_is_external(self, obj):
        return False


class ExternalPurchaseSerializer(serializers.ModelSerializer):
    """External purchase row."""

    is_external = serializers.SerializerMethodField()

    class Meta:
        model = ExternalPurchase
        fields = ['id', 'name', 'purchase_date', 'is_external']
        read_only_fields = fields

    def get_is_external(self, obj):
        return True


def serialize_purchase(purchase):
    """Serialize either purchase kind with its own serializer."""
    if isinstance(purchase, ExternalPurchase):
        return ExternalPurchaseSerializer(purchase).data
    return CoffeePurchaseSerializer(purchase).data


class UnifiedPurchaseSerializer(serializers.Serializer):
    """
    Row of the unified purchase history.

    participant_id is present only for participant purchases.
    """

    id = serializers.IntegerField()
    name = serializers.CharField()
    participant_id = serializers.IntegerField(required=False)
    purchase_date = serializers.DateTimeField()
    is_external = serializers.BooleanField()


class ClearPurchasesResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    deletedCount = serializers.IntegerField()
