from typing import Any, Dict

from django.contrib.auth import get_user_model

from rest_framework import serializers

from tc.apps.api.constants import APIFields as F
from tc.apps.api.messages import APIMessages as M
from tc.apps.api.serializers import StrictFieldsMixin

User = get_user_model()


class UserSerializer( serializers.Serializer ):
    """ Read-only view of an account; the password never leaves the server. """

    def to_representation( self, instance ) -> Dict[str, Any]:
        return {
            F.ID: instance.pk,
            F.USERNAME: instance.username,
            F.EMAIL: instance.email,
            F.NAME: instance.name,
        }


class UniqueEmailMixin:

    def validate_email( self, value : str ) -> str:
        value = User.objects.normalize_email( value.strip() )
        existing = User.objects.filter( email__iexact = value )
        if self.instance is not None:
            existing = existing.exclude( pk = self.instance.pk )
        if existing.exists():
            raise serializers.ValidationError( M.already_exists( 'User', 'email' ))
        return value


class RegisterSerializer( UniqueEmailMixin, serializers.Serializer ):

    username = serializers.CharField( min_length = 3, max_length = 150 )
    password = serializers.CharField(
        min_length = 6,
        max_length = 128,
        trim_whitespace = False,
        write_only = True,
    )
    email = serializers.EmailField( max_length = 254 )
    name = serializers.CharField( min_length = 2, max_length = 150 )

    def validate_username( self, value : str ) -> str:
        if User.objects.filter( username = value ).exists():
            raise serializers.ValidationError( M.already_exists( 'User', 'username' ))
        return value


class LoginSerializer( serializers.Serializer ):

    username = serializers.CharField()
    password = serializers.CharField( trim_whitespace = False, write_only = True )


class ProfilePatchSerializer( StrictFieldsMixin, UniqueEmailMixin, serializers.Serializer ):

    name = serializers.CharField( min_length = 2, max_length = 150 )
    email = serializers.EmailField( max_length = 254 )


class PasswordChangeSerializer( StrictFieldsMixin, serializers.Serializer ):

    currentPassword = serializers.CharField(
        source = 'current_password',
        trim_whitespace = False,
        write_only = True,
    )
    newPassword = serializers.CharField(
        source = 'new_password',
        min_length = 6,
        max_length = 128,
        trim_whitespace = False,
        write_only = True,
    )
