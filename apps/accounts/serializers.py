from rest_framework import serializers


class UserSerializer(serializers.Serializer):
    """Identity provider user as exposed by the API."""

    id = serializers.CharField(read_only=True)
    email = serializers.EmailField(read_only=True)
    created_at = serializers.CharField(read_only=True, allow_null=True)


class SessionSerializer(serializers.Serializer):
    """Tokens issued by the identity provider."""

    access_token = serializers.CharField()
    refresh_token = serializers.CharField()
    token_type = serializers.CharField()
    expires_in = serializers.IntegerField(allow_null=True)
    expires_at = serializers.IntegerField(allow_null=True)


class UserRegistrationSerializer(serializers.Serializer):
    """Serializer for user registration."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        write_only=True,
        required=True,
        style={'input_type': 'password'}
    )


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )
