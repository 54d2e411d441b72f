from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response


class UserViewSet(viewsets.ViewSet):
    """
    ViewSet for user-related operations.
    """

    @action(detail=False, methods=["get"])
    def me(self, request):
        """
        Returns the username and learner id of the logged-in user.
        """
        if request.user.is_authenticated:
            return Response(
                {"username": request.user.username, "id": str(request.user.id)},
                status=status.HTTP_200_OK,
            )
        else:
            return Response(
                {"error": "User not authenticated"}, status=status.HTTP_401_UNAUTHORIZED
            )
