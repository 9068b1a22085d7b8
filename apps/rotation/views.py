from rest_framework import status, serializers
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, inline_serializer

from apps.core.idempotency import idempotent
from apps.participants.serializers import ParticipantSerializer
from apps.purchases.exceptions import (
    MissingBuyerError,
    InvalidBuyerNameError,
    BuyerNotFoundError,
)
from apps.purchases.serializers import serialize_purchase
from .serializers import NextBuyerSerializer, OutOfOrderPurchaseInputSerializer
from .services import get_next_buyer, record_out_of_order_purchase


# Response serializers for API documentation
class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


class ReconciliationErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()
    phase = serializers.ChoiceField(choices=['purchase', 'reorder'])


@extend_schema(
    responses={200: NextBuyerSerializer},
    description=(
        "Next buyer: the participant after the last participant purchase in "
        "the current rotation order. External purchases are ignored."
    ),
    tags=['rotation'],
)
@api_view(['GET'])
def next_buyer(request):
    """Get whose turn it is to buy coffee."""
    return Response(NextBuyerSerializer(get_next_buyer()).data)


@extend_schema(
    request=OutOfOrderPurchaseInputSerializer,
    responses={
        201: inline_serializer('OutOfOrderPurchaseResponse', {
            'purchase': serializers.DictField(),
            'reordered': serializers.BooleanField(),
            'participants': ParticipantSerializer(many=True),
            'next_buyer': NextBuyerSerializer(),
        }),
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
        500: ReconciliationErrorResponseSerializer,
    },
    description=(
        "Record a purchase made out of turn. For a participant the skipped "
        "next buyer moves to the front and the buyer to the back; for an "
        "external buyer_name the rotation is unchanged. Purchase and reorder "
        "commit together or not at all."
    ),
    tags=['rotation'],
)
@api_view(['POST'])
@idempotent('purchases.out_of_order')
def out_of_order_purchase(request):
    """Record an out-of-order purchase and reconcile the rotation."""
    serializer = OutOfOrderPurchaseInputSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        result = record_out_of_order_purchase(
            participant_id=serializer.validated_data.get('participant_id'),
            buyer_name=serializer.validated_data.get('buyer_name'),
            current_next_buyer_id=serializer.validated_data.get('current_next_buyer_id'),
        )
    except (MissingBuyerError, InvalidBuyerNameError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except BuyerNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    # OutOfOrderPurchaseError propagates to the API exception handler (500 + phase)
    return Response({
        'purchase': serialize_purchase(result.purchase),
        'reordered': result.reordered,
        'participants': ParticipantSerializer(result.participants, many=True).data,
        'next_buyer': NextBuyerSerializer(result.next_buyer).data,
    }, status=status.HTTP_201_CREATED)
