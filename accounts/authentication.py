from rest_framework.authentication import BaseAuthentication


class MockHeaderAuthentication(BaseAuthentication):
    """
    Trust the user that MockLoginUserMiddleware attached to the Django request.
    """

    def authenticate(self, request):
        user = getattr(request._request, "user", None)
        if user is None or not user.is_active:
            return None
        return (user, None)

    def authenticate_header(self, request):
        return "X-User-NAME"
