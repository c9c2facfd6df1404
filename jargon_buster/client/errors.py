"""
Client-side errors

Raised by the data-access objects; view-models log them or show the message.
"""

from typing import Optional


class ClientError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class AuthApiError(ClientError):
    pass


class RemoteStoreError(ClientError):
    pass


class ExplainRequestError(ClientError):
    pass
