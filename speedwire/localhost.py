"""Information about the local host: name, addresses, interfaces and clocks."""

from __future__ import annotations

import ipaddress
import platform
import socket
import sys
import time
from dataclasses import dataclass, field

import psutil

from speedwire.address_conversion import (
    is_ipv4,
    is_ipv6,
    mac_to_string,
    reside_on_same_subnet,
    strip_ip_address,
    to_in6_address,
    to_in_address,
    to_mac_address,
)

_UINT64_MASK = (1 << 64) - 1
_INT64_SIGN = 1 << 63
# Prefix length used when none is known; it yields an empty netmask.
_NO_PREFIX = 0xFFFFFFFF
_IS_ARM_LINUX = sys.platform.startswith("linux") and platform.machine().lower().startswith("arm")


@dataclass
class InterfaceInfo:
    """A local network interface and the addresses bound to it."""

    if_name: str = ""
    if_index: int | None = None
    mac_address: str = ""
    ip_addresses: list[str] = field(default_factory=list)
    ip_address_prefix_lengths: dict[str, int] = field(default_factory=dict)


class LocalHost:
    """Cached view of the local host's name, addresses and interfaces."""

    _instance: LocalHost | None = None

    def __init__(self):
        self.hostname = ""
        self.local_ip_addresses: list[str] = []
        self.local_ipv4_addresses: list[str] = []
        self.local_ipv6_addresses: list[str] = []
        self.local_interface_infos: list[InterfaceInfo] = []

    @classmethod
    def get_instance(cls):
        """Return the shared instance, querying the operating system on first use."""
        if cls._instance is None:
            instance = cls()
            instance.cache_hostname(query_hostname())
            instance.cache_local_ip_addresses(query_local_ip_addresses())
            instance.cache_local_interface_infos(query_local_interface_infos())
            if _IS_ARM_LINUX:
                instance._repair_broken_getaddrinfo()
            cls._instance = instance
        return cls._instance

    def _repair_broken_getaddrinfo(self):
        # Some boards only report loopback addresses through getaddrinfo();
        # fall back to the addresses found on the interfaces.
        for addr in self.local_ip_addresses:
            if is_ipv4(addr) and not addr.startswith("127."):
                return
        self.cache_local_ip_addresses(
            [addr for info in self.local_interface_infos for addr in info.ip_addresses]
        )

    def cache_hostname(self, hostname):
        """Store the host name."""
        self.hostname = hostname

    def cache_local_ip_addresses(self, local_ip_addresses):
        """Store the local addresses and split them into IPv4 and IPv6 lists."""
        self.local_ip_addresses = list(local_ip_addresses)
        self.local_ipv4_addresses = []
        self.local_ipv6_addresses = []
        for raw in self.local_ip_addresses:
            addr = strip_ip_address(raw)
            if is_ipv4(addr):
                self.local_ipv4_addresses.append(addr)
            elif is_ipv6(addr):
                self.local_ipv6_addresses.append(addr)

    def cache_local_interface_infos(self, infos):
        """Store the interface information records."""
        self.local_interface_infos = list(infos)

    def _find_interface(self, local_ip_address):
        for info in self.local_interface_infos:
            if local_ip_address in info.ip_addresses:
                return info
        return None

    def get_mac_address(self, local_ip_address):
        """Return the MAC address of the interface holding the address, or None."""
        info = self._find_interface(local_ip_address)
        return info.mac_address if info is not None else None

    def get_interface_name(self, local_ip_address):
        """Return the name of the interface holding the address, or None."""
        info = self._find_interface(local_ip_address)
        return info.if_name if info is not None else None

    def get_interface_index(self, local_ip_address):
        """Return the index of the interface holding the address, or None."""
        info = self._find_interface(local_ip_address)
        return info.if_index if info is not None else None

    def get_interface_prefix_length(self, local_ip_address):
        """Return the prefix length configured for the address, or None."""
        for info in self.local_interface_infos:
            prefix = info.ip_address_prefix_lengths.get(local_ip_address)
            if prefix is not None:
                return prefix
        return None

    def _match(self, ip, candidates, parse):
        for if_addr in candidates:
            prefix = self.get_interface_prefix_length(if_addr)
            if prefix is None:
                prefix = _NO_PREFIX
            if reside_on_same_subnet(parse(if_addr), ip, prefix):
                return if_addr
        if len(candidates) == 1:
            return candidates[0]
        return None

    def get_matching_local_ip_address(self, ip_address):
        """Return the local address on the same subnet as ``ip_address``, or None.

        If no subnet matches but exactly one local address of the same family
        exists, that address is returned.
        """
        if is_ipv4(ip_address):
            return self._match(to_in_address(ip_address), self.local_ipv4_addresses, to_in_address)
        if is_ipv6(ip_address):
            return self._match(to_in6_address(ip_address), self.local_ipv6_addresses, to_in6_address)
        return None


def query_hostname():
    """Return the host name from the operating system, or '' on failure."""
    try:
        return socket.gethostname()
    except OSError:
        return ""


def query_local_ip_addresses():
    """Return the IPv4 and IPv6 addresses the host name resolves to."""
    hostname = query_hostname()
    if not hostname:
        return []
    try:
        entries = socket.getaddrinfo(hostname, None)
    except (socket.gaierror, OSError, UnicodeError):
        return []
    return [
        sockaddr[0]
        for family, _socktype, proto, _canonname, sockaddr in entries
        if proto == 0 and family in (socket.AF_INET, socket.AF_INET6)
    ]


def _if_index(name):
    try:
        return socket.if_nametoindex(name)
    except (OSError, AttributeError):
        return None


def _prefix_length(netmask):
    """Count the leading one bits of a textual netmask; 0 if unknown."""
    if not netmask:
        return 0
    try:
        mask = ipaddress.ip_address(netmask.split("%", 1)[0])
    except ValueError:
        return 0
    width = mask.max_prefixlen
    inverted = ~int(mask) & ((1 << width) - 1)
    return width - inverted.bit_length()


def _normalize_mac(address):
    mac = to_mac_address(address or "")
    return mac_to_string(mac) if any(mac) else ""


def query_local_interface_infos():
    """Return information on every active local interface that has an IP address."""
    stats = psutil.net_if_stats()
    infos = []
    for name, addrs in psutil.net_if_addrs().items():
        stat = stats.get(name)
        if stat is not None and not stat.isup:
            continue
        info = InterfaceInfo(if_name=name, if_index=_if_index(name))
        for addr in addrs:
            if addr.family == psutil.AF_LINK:
                info.mac_address = _normalize_mac(addr.address)
            elif addr.family in (socket.AF_INET, socket.AF_INET6):
                info.ip_addresses.append(addr.address)
                info.ip_address_prefix_lengths[addr.address] = _prefix_length(addr.netmask)
        if info.ip_addresses:
            infos.append(info)
    return infos


def sleep(millis):
    """Sleep for the given number of milliseconds."""
    time.sleep(millis / 1000.0)


def get_tick_count_in_ms():
    """Return a monotonic tick count in milliseconds (not related to the epoch)."""
    return time.monotonic_ns() // 1_000_000


def get_unix_epoch_time_in_ms():
    """Return the current unix epoch time in milliseconds."""
    return time.time_ns() // 1_000_000


def unix_epoch_time_in_ms_to_string(epoch):
    """Format an epoch time in milliseconds as local 'YYYY-MM-DD HH:MM:SS'."""
    try:
        local = time.localtime(epoch // 1000)
    except (OverflowError, OSError, ValueError):
        return ""
    return time.strftime("%Y-%m-%d %H:%M:%S", local)


def calculate_abs_time_difference(time1, time2):
    """Return |time1 - time2| computed on 64-bit wrapping timestamps."""
    diff = (time1 - time2) & _UINT64_MASK
    if diff & _INT64_SIGN:
        diff -= 1 << 64
    return abs(diff)


def _printable(byte):
    return chr(byte) if 0x20 <= byte < 0x7F else "\x1a"


def hexdump(data):
    """Print a hex dump of ``data`` to standard output, 16 bytes per line."""
    buf = bytes(data)
    parts = ["--------:"]
    for i, byte in enumerate(buf):
        if i % 16 == 0:
            if i != 0:
                parts.append("     ")
                parts.append("".join(_printable(b) for b in buf[i - 16 : i]))
            parts.append(f"\n{i:08X}: ")
        parts.append(f"{byte:02X} ")
    parts.append("\n")
    sys.stdout.write("".join(parts))
    sys.stdout.flush()