from rest_framework import authentication
from rest_framework import exceptions

from cookbook.firebase_auth_services import verify_id_token
from cookbook.repos.user_repo import UserRepo


class FirebaseAuthentication(authentication.BaseAuthentication):
    """DRF authentication backend validating Firebase ID tokens."""

    keyword = 'Bearer'

    def authenticate(self, request):
        """Validate the Bearer token and return (user, claims)."""
        auth_header = authentication.get_authorization_header(request).split()
        if not auth_header or auth_header[0].lower() != self.keyword.lower().encode():
            return None
        if len(auth_header) != 2:
            raise exceptions.AuthenticationFailed('Invalid Authorization header')

        claims = verify_id_token(auth_header[1].decode('latin-1'))
        if not claims:
            raise exceptions.AuthenticationFailed('Invalid Firebase token')

        user = UserRepo().get_by_email(claims.get('email') or '')
        if user is None or not user.is_active:
            raise exceptions.AuthenticationFailed('User not found')
        return (user, claims)

    def authenticate_header(self, request):
        return self.keyword
