from fastapi import status


class MembershipError(Exception):
    """Base for every error whose message may be shown to the caller."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# malformed or missing field; the user corrects the input
class ValidationError(MembershipError):
    status_code = 422


# duplicate email or national ID
class ConflictError(MembershipError):
    status_code = status.HTTP_409_CONFLICT


class NotFoundError(MembershipError):
    status_code = status.HTTP_404_NOT_FOUND


class AuthorizationError(MembershipError):
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class StorageError(MembershipError):
    """Transaction or connection failure. The detail is logged, never returned."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
