from typing import Dict, Optional

from fastapi import status
from libs.result import Error


class ClientError(Exception):
    """Business error the caller can fix; rendered as {"error": {code, message}}"""

    def __init__(
        self,
        base_error: Error,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.base_error = base_error
        self.status_code = status_code
        self.headers = headers
        super().__init__(base_error.message)


class ServerError(Exception):
    """Unexpected failure; the message is hidden from the caller"""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)
