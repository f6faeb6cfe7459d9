"""X-Forwarded-For decomposition — pick the first valid hop from a proxy chain."""

from clientip.validators import is_ip


class InvalidInputType(TypeError):
    """Raised when a forwarded-for value is not a string."""

    def __init__(self, message: str, code: str = "invalid_input_type"):
        self.message = message
        self.code = code
        super().__init__(message)


def split_forwarded_for(value: str) -> list[str]:
    """Split a forwarded-for value into trimmed candidate addresses.

    ``"client, proxy1, proxy2"``: left-most is the originating client, right-most
    the nearest proxy. Some platforms (Azure App Service) append a port to IPv4
    hops, so a token with exactly one colon keeps only the part before it.
    Tokens with more colons are IPv6 and stay whole.
    """
    candidates = []
    for token in value.split(","):
        ip = token.strip()
        if ":" in ip:
            parts = ip.split(":")
            if len(parts) == 2:
                ip = parts[0]
        candidates.append(ip)
    return candidates


def get_client_ip_from_x_forwarded_for(value: str | None) -> str | None:
    """Return the first candidate in ``value`` that is a valid IP, scanning left to right.

    Placeholder hops such as ``unknown`` (emitted by Squid and others) are skipped.
    Returns None when ``value`` is empty or holds no valid address.

    Raises:
        InvalidInputType: If ``value`` is present but not a string.
    """
    if not value:
        return None

    if not isinstance(value, str):
        raise InvalidInputType(f'Expected a string, got "{type(value).__name__}"')

    for candidate in split_forwarded_for(value):
        if is_ip(candidate):
            return candidate

    return None
