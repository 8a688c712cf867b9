from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from .constants import APIFields as F


class TcApiView( APIView ):
    """
    Base class for the JSON API views.

    Responses are bare JSON (the browser client reads entity objects and
    arrays directly).  Requires an authenticated session unless a subclass
    says otherwise.
    """
    permission_classes = [ IsAuthenticated ]

    def message_response( self, message : str, status_code : int ) -> Response:
        """ Same body shape the exception handler produces for errors. """
        return Response( { F.MESSAGE: message }, status = status_code )
