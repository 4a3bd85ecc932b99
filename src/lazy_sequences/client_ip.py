"""Client IP detection built on a lazy fallback chain."""

import hashlib
import hmac
import ipaddress
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from .candidates import first_accepted, lazy_candidates
from .sequence.protocols import LoggerProtocol

API_GATEWAY_HEADER = "api-gw-header"
CLOUDFLARE_HEADER = "cf-header"

NO_IP_MESSAGE = "Could not determine user's IP based on request."

logger = logging.getLogger(__name__)


@dataclass
class Request:
    """Incoming request data relevant to IP detection."""

    headers: Dict[str, str] = field(default_factory=dict)
    ip: Optional[str] = None


def _normalize_ip(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    try:
        return str(ipaddress.ip_address(value.strip()))
    except ValueError:
        return None


def sign_gateway_ip(ip: str, secret: str) -> str:
    """Build an ``api-gw-header`` value for ``ip`` signed with ``secret``."""
    digest = hmac.new(secret.encode(), ip.encode(), hashlib.sha256).hexdigest()
    return f"{ip};{digest}"


def parse_api_gateway_header(header: Optional[str], secret: str) -> Optional[str]:
    """
    Extract the client IP from a signed API gateway header.

    The header looks like ``<ip>;<hex hmac-sha256 of ip>``. Returns None when
    the header is missing, malformed or carries a bad signature.
    """
    if not header or ";" not in header:
        return None
    ip, _, signature = header.rpartition(";")
    expected = hmac.new(secret.encode(), ip.encode(), hashlib.sha256).hexdigest()
    if not hmac.compare_digest(expected, signature.strip().lower()):
        logger.debug("Rejected api gateway header with bad signature")
        return None
    return _normalize_ip(ip)


def parse_cloudflare_header(header: Optional[str]) -> Optional[str]:
    """Extract the client IP forwarded by Cloudflare, if it is a valid address."""
    return _normalize_ip(header)


def resolve_client_ip(
    request: Request, secret: str, logger: Optional[LoggerProtocol] = None
) -> str:
    """
    Determine the client IP of ``request``.

    Tries the signed gateway header, then the Cloudflare header, then the
    socket peer address. Later header parsers only run when the earlier ones
    came up empty.

    Raises:
        NoAcceptingCandidateError: If no source yields an address
    """
    gateway_header = request.headers.get(API_GATEWAY_HEADER)
    cloudflare_header = request.headers.get(CLOUDFLARE_HEADER)

    candidates = lazy_candidates(
        lambda: parse_api_gateway_header(gateway_header, secret),
        lambda: parse_cloudflare_header(cloudflare_header),
        lambda: _normalize_ip(request.ip),
    )
    return first_accepted(
        candidates,
        context={
            API_GATEWAY_HEADER: gateway_header,
            CLOUDFLARE_HEADER: cloudflare_header,
            "requestIp": request.ip,
        },
        message=NO_IP_MESSAGE,
        logger=logger,
    )
