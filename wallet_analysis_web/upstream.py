import logging
from typing import Any, Dict, Mapping, Optional

import requests

from wallet_analysis_web.config import DEFAULT_TIMEOUT_SECONDS, USER_AGENT, WALLET_ANALYSIS_PATH
from wallet_analysis_web.exceptions import (
    UpstreamConnectionError,
    UpstreamError,
    UpstreamHTTPError,
    UpstreamResponseError,
    UpstreamTimeoutError,
)

logger = logging.getLogger("wallet-analysis-web")

# Outbound parameter order; anything else on the inbound request is dropped
FORWARDED_PARAMS = (
    "address",
    "quick_trade_minutes",
    "days",
    "quick_trade",
    "is_coin_transferred_from_another_account",
    "coin_traded_to_another_wallet",
    "is_unrealized_profit",
)


def build_upstream_params(args: Mapping[str, Any]) -> Dict[str, str]:
    """
    Pick the query parameters to forward to the analysis service.

    A parameter is forwarded only when it was supplied with a non-empty value.
    The literal string "false" is non-empty, so a switched-off filter sent as
    "false" still reaches the service; an empty string does not.
    """
    params = {}
    for name in FORWARDED_PARAMS:
        value = args.get(name)
        if value:
            params[name] = str(value)
    return params


def _parse_body(resp: requests.Response) -> Optional[Any]:
    try:
        return resp.json()
    except ValueError:
        return resp.text or None


class AnalysisClient:
    """Blocking client for the external wallet analysis service."""

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT_SECONDS,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update({
                "Content-Type": "application/json",
                "User-Agent": USER_AGENT,
            })
        return self._session

    @property
    def analysis_url(self) -> str:
        return f"{self.base_url}{WALLET_ANALYSIS_PATH}"

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    def get_wallet_analysis(self, params: Mapping[str, str]) -> Any:
        """
        Issue a single GET to <base_url>/wallet/analysis and return the parsed JSON.

        No retries. The timeout bounds the connect and each socket read
        separately, not the whole exchange; a service that keeps trickling
        bytes can run past it. Every failure is raised as an UpstreamError
        subclass so the caller can tell a timeout from an unreachable service
        or a bad answer.
        """
        url = self.analysis_url
        logger.info(f"Requesting wallet analysis from {url} with {dict(params)}")

        try:
            resp = self.session.get(url, params=dict(params), timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            logger.warning(f"Analysis service timed out after {self.timeout}s: {e}")
            raise UpstreamTimeoutError(f"No answer from {url} within {self.timeout}s") from e
        except requests.exceptions.ConnectionError as e:
            logger.warning(f"Analysis service unreachable at {url}: {e}")
            raise UpstreamConnectionError(f"Could not connect to {url}") from e
        except requests.exceptions.RequestException as e:
            logger.warning(f"Request to analysis service failed: {e}")
            raise UpstreamError(str(e)) from e

        if not resp.ok:
            body = _parse_body(resp)
            logger.warning(f"Analysis service returned HTTP {resp.status_code}: {body}")
            raise UpstreamHTTPError(resp.status_code, body)

        try:
            return resp.json()
        except ValueError as e:
            logger.warning(f"Analysis service returned a non-JSON body: {e}")
            raise UpstreamResponseError("Analysis service returned invalid JSON") from e
