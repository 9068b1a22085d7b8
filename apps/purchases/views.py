from rest_framework import status, serializers as drf_serializers
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, OpenApiParameter, PolymorphicProxySerializer

from apps.core.idempotency import idempotent
from .exceptions import (
    MissingBuyerError,
    InvalidBuyerNameError,
    InvalidPurchaseTypeError,
    BuyerNotFoundError,
    PurchaseNotFoundError,
)
from .serializers import (
    RecordPurchaseSerializer,
    CoffeePurchaseSerializer,
    ExternalPurchaseSerializer,
    UnifiedPurchaseSerializer,
    ClearPurchasesResponseSerializer,
    serialize_purchase,
)
from .services import PurchaseLedgerService


# Response serializers for API documentation
class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


class MessageResponseSerializer(drf_serializers.Serializer):
    message = drf_serializers.CharField()


PurchaseResponseSerializer = PolymorphicProxySerializer(
    component_name='RecordedPurchase',
    serializers=[CoffeePurchaseSerializer, ExternalPurchaseSerializer],
    resource_type_field_name=None,
)


@extend_schema(
    methods=['GET'],
    responses={200: UnifiedPurchaseSerializer(many=True)},
    description="Unified purchase history (participant and external), newest first.",
    tags=['purchases'],
)
@extend_schema(
    methods=['POST'],
    request=RecordPurchaseSerializer,
    responses={
        201: PurchaseResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description=(
        "Record a purchase for participant_id, or for an external buyer_name. "
        "Send an Idempotency-Key header to make retries safe."
    ),
    tags=['purchases'],
)
@extend_schema(
    methods=['DELETE'],
    responses={200: ClearPurchasesResponseSerializer},
    description="Delete all purchase history of both kinds. Irreversible.",
    tags=['purchases'],
)
@api_view(['GET', 'POST', 'DELETE'])
@idempotent('purchases.create')
def purchase_collection(request):
    """List, record or clear purchases."""
    if request.method == 'GET':
        rows = PurchaseLedgerService.list_all()
        return Response(UnifiedPurchaseSerializer(rows, many=True).data)

    if request.method == 'DELETE':
        deleted_count = PurchaseLedgerService.clear_all()
        return Response({
            'message': 'All purchase history (regular and external) deleted successfully',
            'deletedCount': deleted_count,
        })

    serializer = RecordPurchaseSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        purchase = PurchaseLedgerService.record_purchase(
            participant_id=serializer.validated_data.get('participant_id'),
            buyer_name=serializer.validated_data.get('buyer_name'),
        )
    except (MissingBuyerError, InvalidBuyerNameError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except BuyerNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response(serialize_purchase(purchase), status=status.HTTP_201_CREATED)


@extend_schema(
    parameters=[
        OpenApiParameter(
            name='type',
            description='Purchase kind the id refers to',
            required=True,
            enum=['coffee', 'external'],
        ),
    ],
    responses={
        200: MessageResponseSerializer,
        400: ErrorResponseSerializer,
        404: ErrorResponseSerializer,
    },
    description="Delete a single purchase of the given kind.",
    tags=['purchases'],
)
@api_view(['DELETE'])
def purchase_detail(request, purchase_id):
    """Delete one purchase."""
    kind = request.query_params.get('type')

    try:
        PurchaseLedgerService.delete_one(purchase_id=purchase_id, kind=kind)
    except InvalidPurchaseTypeError as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
    except PurchaseNotFoundError as e:
        return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

    return Response({'message': f"{kind.capitalize()} purchase deleted successfully"})
