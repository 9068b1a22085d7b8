from rest_framework import status, serializers
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import SharedPasswordLoginSerializer, LoginResponseSerializer
from .services import (
    authenticate_shared_password,
    InvalidCredentialsError,
    LoginNotConfiguredError,
)


# Response serializers for API documentation
class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


@extend_schema(
    request=SharedPasswordLoginSerializer,
    responses={
        200: LoginResponseSerializer,
        401: ErrorResponseSerializer,
        500: ErrorResponseSerializer,
    },
    description="Check the group's shared password.",
    tags=['auth'],
)
@api_view(['POST'])
def login(request):
    """Login with the shared password."""
    serializer = SharedPasswordLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        authenticate_shared_password(password=serializer.validated_data.get('password'))
    except LoginNotConfiguredError as e:
        return Response({'error': str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
    except InvalidCredentialsError as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)

    return Response({'authenticated': True, 'message': 'Login successful.'})
