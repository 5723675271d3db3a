"""Conversions between textual and binary IP and MAC addresses."""

from __future__ import annotations

import ipaddress
import socket
import string

_HEX_DIGITS = {c: int(c, 16) for c in string.hexdigits}
_MAC_DELIMITERS = ":-"
_IPV4_ALL_ONES = (1 << 32) - 1
_IPV6_ALL_ONES = (1 << 128) - 1


def _to_ip(address):
    """Coerce a string, packed bytes or address object into an address object."""
    if isinstance(address, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return address
    if isinstance(address, (bytes, bytearray)):
        return ipaddress.ip_address(bytes(address))
    if isinstance(address, str):
        return ipaddress.ip_address(address)
    raise TypeError(f"unsupported address type: {type(address).__name__}")


def socket_address_to_string(address, port=0):
    """Format an address, adding ``:port`` (or ``[addr]:port`` for IPv6) if port is set."""
    if not 0 <= port <= 0xFFFF:
        raise ValueError(f"port out of range: {port}")
    ip = _to_ip(address)
    if port == 0:
        return str(ip)
    if ip.version == 6:
        return f"[{ip}]:{port}"
    return f"{ip}:{port}"


def _pton(family, text):
    try:
        return socket.inet_pton(family, text)
    except (OSError, ValueError, TypeError):
        return None


def is_ipv4(ip_address):
    """Return True if the string is a valid dotted IPv4 address."""
    return _pton(socket.AF_INET, ip_address) is not None


def is_ipv6(ip_address):
    """Return True if the string is a valid IPv6 address."""
    return _pton(socket.AF_INET6, ip_address) is not None


def to_in_address(ipv4_address):
    """Parse an IPv4 address string; raise ValueError if it is invalid."""
    packed = _pton(socket.AF_INET, ipv4_address)
    if packed is None:
        raise ValueError(f"invalid ipv4 address: {ipv4_address!r}")
    return ipaddress.IPv4Address(packed)


def to_in6_address(ipv6_address):
    """Parse an IPv6 address string, ignoring any ``%scope`` suffix."""
    text = ipv6_address.split("%", 1)[0]
    packed = _pton(socket.AF_INET6, text)
    if packed is None:
        raise ValueError(f"invalid ipv6 address: {ipv6_address!r}")
    return ipaddress.IPv6Address(packed)


def to_in_net_mask(prefix_length):
    """Return the IPv4 netmask for a prefix length; beyond 32 the mask is empty."""
    if 0 <= prefix_length <= 32:
        return ipaddress.IPv4Address((_IPV4_ALL_ONES << (32 - prefix_length)) & _IPV4_ALL_ONES)
    return ipaddress.IPv4Address(0)


def to_in6_net_mask(prefix_length):
    """Return the IPv6 netmask for a prefix length; beyond 128 the mask is empty."""
    if 0 <= prefix_length <= 128:
        return ipaddress.IPv6Address((_IPV6_ALL_ONES << (128 - prefix_length)) & _IPV6_ALL_ONES)
    return ipaddress.IPv6Address(0)


def _coerce_host(host):
    if isinstance(host, str):
        if is_ipv4(host):
            return to_in_address(host)
        if is_ipv6(host):
            return to_in6_address(host)
        return None
    return _to_ip(host)


def reside_on_same_subnet(host1, host2, prefix_length):
    """Return True if both hosts share the same network under ``prefix_length``.

    Hosts of different address families, or unparsable strings, never match.
    """
    addr1 = _coerce_host(host1)
    addr2 = _coerce_host(host2)
    if addr1 is None or addr2 is None or addr1.version != addr2.version:
        return False
    mask = to_in_net_mask(prefix_length) if addr1.version == 4 else to_in6_net_mask(prefix_length)
    mask_bits = int(mask)
    return (int(addr1) & mask_bits) == (int(addr2) & mask_bits)


def strip_ip_address(ip_address):
    """Remove brackets, scope ids, prefix lengths and ports around an address."""
    start = ip_address.find("[") + 1
    rest = ip_address[start:]
    cuts = [pos for pos in (rest.find(c) for c in "%/]") if pos >= 0]
    return rest[: min(cuts)] if cuts else rest


def hex_to_int(c):
    """Return the value of a single hexadecimal digit; raise ValueError otherwise."""
    try:
        return _HEX_DIGITS[c]
    except (KeyError, TypeError):
        raise ValueError(f"not a hexadecimal digit: {c!r}") from None


def to_mac_address(mac):
    """Parse a 6-byte MAC address with optional ':' or '-' delimiters.

    Malformed input yields six zero bytes.
    """
    result = bytearray()
    i = 0
    length = len(mac)
    while i + 1 < length and len(result) < 6:
        try:
            high = hex_to_int(mac[i])
            low = hex_to_int(mac[i + 1])
        except ValueError:
            break
        result.append(high * 16 + low)
        if i + 2 < length and mac[i + 2] in _MAC_DELIMITERS:
            i += 1
        i += 2
    if i < length or len(result) != 6:
        return bytes(6)
    return bytes(result)


def mac_to_string(mac):
    """Format a 6-byte MAC address as upper-case, colon separated hex."""
    data = bytes(mac)
    if len(data) != 6:
        raise ValueError(f"mac address must have 6 bytes, got {len(data)}")
    return ":".join(f"{b:02X}" for b in data)