from rest_framework import serializers
from .models import Participant, ReorderHistoryEntry


# =============================================================================
# Input Serializers
# =============================================================================

class ParticipantNameSerializer(serializers.Serializer):
    """
    Validate body for creating or renaming a participant.

    Fields:
        name (str): Participant name. Blank or missing names are rejected
            by the service with "Name is required".
    """

    name = serializers.CharField(
        max_length=200,
        required=False,
        allow_blank=True,
        allow_null=True,
        trim_whitespace=False,
        default='',
    )


class ReorderInputSerializer(serializers.Serializer):
    """
    Validate body for reordering the rotation.

    Fields:
        participantIds (list[int]): Every participant id in the new order
    """

    participantIds = serializers.ListField(
        child=serializers.IntegerField(min_value=1),
        allow_empty=True,
    )


# =============================================================================
# Output Serializers
# =============================================================================

class ParticipantSerializer(serializers.ModelSerializer):
    """Participant as exposed by the API."""

    class Meta:
        model = Participant
        fields = ['id', 'name', 'created_at', 'order_position']
        read_only_fields = fields


class ParticipantMinimalSerializer(serializers.ModelSerializer):
    """Minimal participant info for delete confirmations."""

    class Meta:
        model = Participant
        fields = ['id', 'name']
        read_only_fields = fields


class ParticipantDeletedSerializer(serializers.Serializer):
    """Response body for a successful delete."""

    message = serializers.CharField()
    participant = ParticipantMinimalSerializer()


class ReorderHistoryEntrySerializer(serializers.ModelSerializer):
    """Before/after snapshot of a reorder."""

    old_order = serializers.ListField(child=serializers.IntegerField(), read_only=True)
    new_order = serializers.ListField(child=serializers.IntegerField(), read_only=True)

    class Meta:
        model = ReorderHistoryEntry
        fields = ['id', 'timestamp', 'old_order', 'new_order']
        read_only_fields = fields
