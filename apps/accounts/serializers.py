from rest_framework import serializers


class SharedPasswordLoginSerializer(serializers.Serializer):
    """Serializer for shared password login."""

    password = serializers.CharField(
        required=False,
        allow_blank=True,
        trim_whitespace=False,
        style={'input_type': 'password'},
    )


class LoginResponseSerializer(serializers.Serializer):
    authenticated = serializers.BooleanField()
    message = serializers.CharField()
