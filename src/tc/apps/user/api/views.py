import logging

from django.contrib.auth import authenticate, login, logout, update_session_auth_hash

from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.permissions import AllowAny
from rest_framework.request import Request
from rest_framework.response import Response

from tc.apps.api.messages import APIMessages as M
from tc.apps.api.throttling import AuthAttemptRateThrottle
from tc.apps.api.views import TcApiView
from tc.apps.user.services import UserAccountService

from .serializers import (
    LoginSerializer,
    PasswordChangeSerializer,
    ProfilePatchSerializer,
    RegisterSerializer,
    UserSerializer,
)

logger = logging.getLogger(__name__)


class RegisterView( TcApiView ):
    """
    POST /api/register
    Creates the account and starts a session for it.
    """
    permission_classes = [ AllowAny ]
    throttle_classes = [ AuthAttemptRateThrottle ]

    def post( self, request: Request ) -> Response:
        serializer = RegisterSerializer( data = request.data )
        serializer.is_valid( raise_exception = True )

        user = UserAccountService.register( serializer.validated_data )
        login( request, user )
        return Response( UserSerializer( user ).data, status = status.HTTP_201_CREATED )


class LoginView( TcApiView ):
    """
    POST /api/login
    """
    permission_classes = [ AllowAny ]
    throttle_classes = [ AuthAttemptRateThrottle ]

    def post( self, request: Request ) -> Response:
        serializer = LoginSerializer( data = request.data )
        serializer.is_valid( raise_exception = True )

        user = authenticate(
            request,
            username = serializer.validated_data['username'],
            password = serializer.validated_data['password'],
        )
        if user is None:
            logger.debug( 'Rejected login attempt' )
            raise AuthenticationFailed( M.INVALID_CREDENTIALS )

        login( request, user )
        return Response( UserSerializer( user ).data )


class LogoutView( TcApiView ):
    """
    POST /api/logout
    Always succeeds, signed in or not.
    """
    permission_classes = [ AllowAny ]

    def post( self, request: Request ) -> Response:
        logout( request )
        return self.message_response( M.LOGGED_OUT, status.HTTP_200_OK )


class CurrentUserView( TcApiView ):
    """
    GET /api/user
    """

    def get( self, request: Request ) -> Response:
        return Response( UserSerializer( request.user ).data )


class ProfileView( TcApiView ):
    """
    PATCH /api/user/profile
    Accepts exactly name and/or email.
    """

    def patch( self, request: Request ) -> Response:
        serializer = ProfilePatchSerializer( request.user, data = request.data, partial = True )
        serializer.is_valid( raise_exception = True )

        user = UserAccountService.update_profile(
            user = request.user,
            validated_data = serializer.validated_data,
        )
        return Response( UserSerializer( user ).data )


class PasswordView( TcApiView ):
    """
    PATCH /api/user/password
    The current session stays valid after the change.
    """

    def patch( self, request: Request ) -> Response:
        serializer = PasswordChangeSerializer( data = request.data )
        serializer.is_valid( raise_exception = True )

        user = request.user
        if not user.check_password( serializer.validated_data['current_password'] ):
            raise AuthenticationFailed( M.INCORRECT_PASSWORD )

        UserAccountService.change_password(
            user = user,
            new_password = serializer.validated_data['new_password'],
        )
        update_session_auth_hash( request, user )
        return Response( UserSerializer( user ).data )
