"""IP literal validation — IPv4 dotted-quad and IPv6 colon-hex grammars.

Both grammars are total-match regular expressions; ``is_ip`` is their OR.
Anything that is not a ``str`` (including ``None``) is simply not an IP.
"""

import re

_OCTET = r"(?:25[0-5]|2[0-4][0-9]|1[0-9]{2}|[1-9][0-9]|[0-9])"
_IPV4 = rf"{_OCTET}(?:\.{_OCTET}){{3}}"
_HEX = r"[0-9a-f]{1,4}"


def _ipv6_pattern() -> str:
    """Build the IPv6 grammar as one alternative per position of ``::``.

    A full address has 8 groups; an embedded IPv4 tail stands in for the last two.
    ``::`` replaces at least one zero group, so at most ``groups - 1`` groups
    are written out around it.
    """
    alternatives = [
        rf"(?:{_HEX}:){{7}}{_HEX}",
        rf"(?:{_HEX}:){{6}}{_IPV4}",
    ]
    for groups, ipv4_tail in ((8, False), (6, True)):
        for left in range(groups):
            right = groups - 1 - left
            head = rf"(?:{_HEX}:){{{left - 1}}}{_HEX}" if left else ""
            if ipv4_tail:
                tail = rf"(?:{_HEX}:){{0,{right}}}{_IPV4}"
            elif right:
                tail = rf"(?:{_HEX}(?::{_HEX}){{0,{right - 1}}})?"
            else:
                tail = ""
            alternatives.append(f"{head}::{tail}")
    return "|".join(f"(?:{alt})" for alt in alternatives)


_IPV4_RE = re.compile(_IPV4, re.ASCII)
_IPV6_RE = re.compile(_ipv6_pattern(), re.ASCII | re.IGNORECASE)


def is_ipv4(value: object) -> bool:
    """True if ``value`` is a dotted-quad IPv4 literal (no leading zeros)."""
    return isinstance(value, str) and _IPV4_RE.fullmatch(value) is not None


def is_ipv6(value: object) -> bool:
    """True if ``value`` is an IPv6 literal, full or ``::``-compressed.

    Hex groups are case-insensitive and the address may end in an IPv4 tail
    (``::ffff:192.0.2.1``). Zone ids (``fe80::1%eth0``) are rejected.
    """
    return isinstance(value, str) and _IPV6_RE.fullmatch(value) is not None


def is_ip(value: object) -> bool:
    """True if ``value`` is an IPv4 or IPv6 literal. Never raises."""
    if not isinstance(value, str) or not value:
        return False
    return is_ipv4(value) or is_ipv6(value)


def ip_version(value: object) -> int | None:
    """Return 4 or 6 for a valid literal, None otherwise."""
    if is_ipv4(value):
        return 4
    if is_ipv6(value):
        return 6
    return None
