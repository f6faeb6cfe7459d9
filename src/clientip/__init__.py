"""clientip — Resolve the originating client IP behind proxies, load balancers and CDNs."""

__version__ = "0.1.0"

from clientip.config import ProxyConfig, parse_trusted_proxies
from clientip.forwarded import InvalidInputType, get_client_ip_from_x_forwarded_for, split_forwarded_for
from clientip.resolver import CLIENT_IP_HEADERS, HeaderSource, get_client_ip
from clientip.validators import ip_version, is_ip, is_ipv4, is_ipv6

__all__ = [
    "CLIENT_IP_HEADERS",
    "HeaderSource",
    "InvalidInputType",
    "ProxyConfig",
    "get_client_ip",
    "get_client_ip_from_x_forwarded_for",
    "ip_version",
    "is_ip",
    "is_ipv4",
    "is_ipv6",
    "parse_trusted_proxies",
    "split_forwarded_for",
]
