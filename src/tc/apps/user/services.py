"""
Account operations behind the user API: registration, profile edits and
password changes.  Credential checks stay in the views, which own the
session.
"""
import logging
from typing import Any, Dict

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from tc.apps.api.messages import APIMessages as M
from tc.exceptions import InvalidRequestError

User = get_user_model()
logger = logging.getLogger(__name__)


class UserAccountService:

    PROFILE_UPDATABLE_FIELDS = (
        'name',
        'email',
    )

    @classmethod
    def register( cls, validated_data : Dict[ str, Any ] ) -> User:
        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    username = validated_data['username'],
                    email = validated_data['email'],
                    password = validated_data['password'],
                    name = validated_data['name'],
                )
        except IntegrityError:
            # Serializer checks uniqueness first; this is a concurrent signup.
            raise InvalidRequestError( M.already_exists( 'User', 'username or email' ))

        logger.info( f'Registered user {user.pk}' )
        return user

    @classmethod
    def update_profile( cls, user : User, validated_data : Dict[ str, Any ] ) -> User:
        update_fields = [ name for name in validated_data if name in cls.PROFILE_UPDATABLE_FIELDS ]
        for name in update_fields:
            setattr( user, name, validated_data[name] )
            continue
        if update_fields:
            try:
                with transaction.atomic():
                    user.save( update_fields = update_fields )
            except IntegrityError:
                raise InvalidRequestError( M.already_exists( 'User', 'email' ))
        return user

    @classmethod
    def change_password( cls, user : User, new_password : str ) -> None:
        user.set_password( new_password )
        user.save( update_fields = [ 'password' ] )
        logger.info( f'Password changed for user {user.pk}' )
        return
