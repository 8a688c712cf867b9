from rest_framework import authentication


class SessionDRFAuthAdapter( authentication.SessionAuthentication ):
    """
    Django session authentication for the JSON API.

    DRF only answers 401 (rather than 403) for unauthenticated requests when
    the first authenticator supplies a WWW-Authenticate challenge, so this
    adapter provides one.  CSRF enforcement is inherited unchanged.
    """
    keyword = 'Session'

    def authenticate_header(self, request) -> str:
        return self.keyword
