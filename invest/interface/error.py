"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    kind = "interface_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnauthenticatedError(InterfaceError):
    """Request carries no valid identity token."""

    kind = "unauthenticated"
