"""Proxy trust configuration for framework integrations."""

from collections.abc import Iterable
from dataclasses import dataclass
from ipaddress import IPv4Network, IPv6Network, ip_network


def parse_trusted_proxies(proxies: Iterable[str]) -> tuple[IPv4Network | IPv6Network, ...]:
    """Parse IPs/CIDRs like '10.0.0.0/8' or '172.18.0.1' into networks.

    A bare IP is treated as a single-address network (/32 or /128).

    Raises ValueError on an invalid entry.
    """
    networks = []
    for entry in proxies:
        try:
            networks.append(ip_network(entry.strip(), strict=False))
        except ValueError:
            raise ValueError(f"Invalid IP/CIDR in trusted_proxies: '{entry}'")
    return tuple(networks)


@dataclass(frozen=True, slots=True)
class ProxyConfig:
    """When to believe client-IP headers. Pass to the framework integration.

    - Neither option set: headers are ignored, the socket peer is used.
    - trust_proxy=True: headers are always read.
    - trusted_proxy_networks: headers are read only when the socket peer is
      inside one of the networks (spoofing prevention). Applies even when
      trust_proxy is False.

    Example:
        ProxyConfig()                                           # Direct connections
        ProxyConfig(trust_proxy=True)                           # Always behind a proxy
        ProxyConfig.from_trusted_proxies(["172.18.0.0/16"])     # Strict mode
    """

    trust_proxy: bool = False
    trusted_proxy_networks: tuple[IPv4Network | IPv6Network, ...] = ()

    @classmethod
    def from_trusted_proxies(
        cls, trusted_proxies: Iterable[str], *, trust_proxy: bool = False,
    ) -> "ProxyConfig":
        """Build a config from IP/CIDR strings. Raises ValueError on a bad entry."""
        return cls(
            trust_proxy=trust_proxy,
            trusted_proxy_networks=parse_trusted_proxies(trusted_proxies),
        )

    @property
    def reads_headers(self) -> bool:
        return self.trust_proxy or bool(self.trusted_proxy_networks)
