"""Application errors and their HTTP mapping.

Error code ranges:
  1xxx: User
  9xxx: Infrastructure / system
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: User ---

class UserNotFoundError(AppError):
    def __init__(self, user_id: int) -> None:
        super().__init__(1001, f"User not found: {user_id}", 404)


# --- 9xxx: Infrastructure ---

class InfrastructureError(AppError):
    """Store or cache unreachable, timed out, or otherwise failing."""

    def __init__(self, detail: str = "Internal server error", code: int = 9000) -> None:
        super().__init__(code, detail, 500)


class StoreError(InfrastructureError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Store error: {detail}", 9001)


class CacheError(InfrastructureError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Cache error: {detail}", 9002)
