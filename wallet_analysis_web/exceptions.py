"""Custom exceptions for the wallet analysis web app."""

from typing import Any, Optional


class WalletAnalysisError(Exception):
    """Base exception for all wallet analysis web errors."""
    pass


class ConfigurationError(WalletAnalysisError):
    """Raised when there's a configuration error."""
    pass


class UpstreamError(WalletAnalysisError):
    """Raised when the external analysis service call fails."""
    pass


class UpstreamTimeoutError(UpstreamError):
    """Raised when the analysis service does not answer within the timeout."""
    pass


class UpstreamConnectionError(UpstreamError):
    """Raised when the analysis service cannot be reached."""
    pass


class UpstreamResponseError(UpstreamError):
    """Raised when the analysis service returns a body that is not JSON."""
    pass


class UpstreamHTTPError(UpstreamError):
    """Raised when the analysis service answers with a non-2xx status."""

    def __init__(self, status_code: int, body: Optional[Any] = None):
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP {status_code} - {body}")

    @property
    def detail(self) -> Optional[str]:
        """The upstream's own error message, if it sent one."""
        if isinstance(self.body, dict):
            error = self.body.get("error") or self.body.get("message")
            if error:
                return str(error)
        return None
