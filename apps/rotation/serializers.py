from rest_framework import serializers

from apps.participants.serializers import ParticipantSerializer


# =============================================================================
# Input Serializers
# =============================================================================

class OutOfOrderPurchaseInputSerializer(serializers.Serializer):
    """
    Validate body for an out-of-order purchase.

    Fields:
        participant_id (int): Roster participant who bought out of turn
        buyer_name (str): Non-member who bought (no reorder happens)
        current_next_buyer_id (int): Who was next before the purchase;
            computed server side when omitted
    """

    participant_id = serializers.IntegerField(min_value=1, required=False, allow_null=True)
    buyer_name = serializers.CharField(
        max_length=200,
        required=False,
        allow_blank=True,
        allow_null=True,
    )
    current_next_buyer_id = serializers.IntegerField(min_value=1, required=False, allow_null=True)


# =============================================================================
# Output Serializers
# =============================================================================

class LastPurchaseSerializer(serializers.Serializer):
    """Newest participant purchase."""

    participant_id = serializers.IntegerField()
    name = serializers.CharField(allow_null=True)
    purchase_date = serializers.DateTimeField()


class NextBuyerSerializer(serializers.Serializer):
    """
    Next buyer view.

    ``message`` only appears when the roster is empty.
    """

    next_buyer = ParticipantSerializer(allow_null=True)
    last_purchase = LastPurchaseSerializer(allow_null=True, required=False)
    message = serializers.CharField(required=False)

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if data.get('message') is None:
            data.pop('message', None)
        elif data.get('last_purchase') is None:
            # Empty roster: {next_buyer: null, message}
            data.pop('last_purchase', None)
        return data
