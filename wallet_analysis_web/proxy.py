"""
Proxy for the external wallet analysis service.

The upstream body is relayed verbatim on success. Failures are turned into a
``{"success": False, "error": ...}`` envelope whose status tells the caller
what went wrong: the upstream's own status for HTTP errors, 504 for a timeout,
502 for an unreachable service or a non-JSON answer, 500 for anything else.
"""
import logging
from typing import Any, Dict, Mapping, Optional, Tuple

from wallet_analysis_web.exceptions import (
    UpstreamConnectionError,
    UpstreamHTTPError,
    UpstreamResponseError,
    UpstreamTimeoutError,
)
from wallet_analysis_web.upstream import AnalysisClient, build_upstream_params

logger = logging.getLogger("wallet-analysis-web")

ADDRESS_REQUIRED = "Cüzdan adresi gereklidir"
GENERIC_FAILURE = "API isteği sırasında bir hata oluştu"
UPSTREAM_TIMEOUT = "Analiz servisi zaman aşımına uğradı"
UPSTREAM_UNREACHABLE = "Analiz servisine ulaşılamadı"
UPSTREAM_INVALID_BODY = "Analiz servisinden geçersiz yanıt alındı"


def error_body(message: str, upstream_status: Optional[int] = None, include_status: bool = True) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": False, "error": message}
    if include_status:
        body["upstream_status"] = upstream_status
    return body


def proxy_wallet_analysis(args: Mapping[str, Any], client: AnalysisClient) -> Tuple[Any, int]:
    """
    Validate the inbound query, forward it upstream and return (body, status).
    """
    address = args.get("address")
    if not address or not str(address).strip():
        return error_body(ADDRESS_REQUIRED, include_status=False), 400

    params = build_upstream_params(args)

    try:
        return client.get_wallet_analysis(params), 200
    except UpstreamHTTPError as e:
        message = e.detail or f"Analiz servisi hata döndürdü (HTTP {e.status_code})"
        return error_body(message, e.status_code), e.status_code
    except UpstreamTimeoutError:
        return error_body(UPSTREAM_TIMEOUT), 504
    except UpstreamConnectionError:
        return error_body(UPSTREAM_UNREACHABLE), 502
    except UpstreamResponseError:
        return error_body(UPSTREAM_INVALID_BODY), 502
    except Exception:
        logger.exception(f"Unexpected error while proxying wallet analysis for {address}")
        return error_body(GENERIC_FAILURE, include_status=False), 500
