"""FastAPI integration for clientip."""

from clientip.integrations.fastapi.deps import create_client_ip_dep
from clientip.integrations.fastapi.proxy import get_request_ip

__all__ = [
    "create_client_ip_dep",
    "get_request_ip",
]
