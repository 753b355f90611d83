"""
Application errors for clean API error handling.

InvalidQueryError maps to 400 in the API layer. DelegateError never leaves the
LLM delegate: it is turned into a DelegateFailure result. StoreUnavailableError
is fatal and aborts startup.
"""


class InvalidQueryError(Exception):
    """Raised when required request input (e.g. the chat message) is missing or empty."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DelegateError(Exception):
    """Raised inside an augmentation delegate when the remote call fails or returns garbage."""

    def __init__(self, kind: str, message: str) -> None:
        self.kind = kind
        self.message = message
        super().__init__(f"{kind}: {message}")


class StoreUnavailableError(Exception):
    """Raised when the campus database cannot be opened or initialized."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
