"""IP literal detection — pure predicate, no network access."""

import ipaddress


def is_ip_address(value: str | None) -> bool:
    """Return True if *value* is an IPv4 or IPv6 literal.

    Covers dotted quads ("127.0.0.1"), compressed IPv6 ("::1") and
    IPv4-mapped IPv6 ("::ffff:88.188.221.14"). Surrounding whitespace
    is ignored; anything else (hostnames, CIDR blocks, street addresses)
    is not an IP literal.
    """
    if not value:
        return False
    try:
        ipaddress.ip_address(value.strip())
    except ValueError:
        return False
    return True
