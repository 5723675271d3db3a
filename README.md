# speedwire

A Python library with core pieces for working with SMA speedwire devices
(energy meters and inverters): packet byte encoding, IP and MAC address
handling, logging, measurement classification, OBIS identifiers, temporal
averaging of measurement streams and information about the local host.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `speedwire.byte_encoding` – read and write unsigned 8/16/32/64-bit integers
  in big- and little-endian order at an offset of a buffer
  (`get_uint8`, `set_uint8`, `get_uint32_big_endian`,
  `set_uint64_little_endian`, ...). Setters need a writable buffer such as
  a `bytearray`.
- `speedwire.address_conversion` – IPv4/IPv6 helpers:
  - `is_ipv4`, `is_ipv6` validate address strings;
  - `to_in_address`, `to_in6_address` parse them into `ipaddress` objects
    and raise `ValueError` on invalid input (`to_in6_address` drops a
    `%scope` suffix);
  - `to_in_net_mask`, `to_in6_net_mask` build netmasks from prefix lengths
    (a prefix length beyond 32 or 128 gives an all-zero mask);
  - `reside_on_same_subnet` compares two hosts of the same family under a
    prefix length;
  - `strip_ip_address` removes brackets, `%scope`, `/prefix` and ports;
  - `socket_address_to_string` formats `addr:port` or `[addr]:port`;
  - `to_mac_address` parses a MAC address with optional `:` or `-`
    delimiters (malformed input gives six zero bytes), `mac_to_string`
    formats six bytes as `AA:BB:CC:DD:EE:FF`, `hex_to_int` converts one
    hex digit.
- `speedwire.logger` – `Logger(module_name).print(level, message, *args)`
  formats printf-style messages prefixed with the severity and module name.
  Without a listener they go to standard error; `set_log_listener(listener,
  level)` routes messages whose `LogLevel` matches `level` to the listener's
  `log_msg(text, level)` instead (`None` removes the listener). `LogListener`
  writes to a given stream or standard error.
- `speedwire.measurement_type` – the `Direction`, `Wire`, `Quantity` and
  `Type` enumerations, `is_instantaneous`, and `MeasurementType`, which
  derives names such as `positive_active_power`;
  `MeasurementType.get_full_name(wire)` appends the wire unless it is
  `TOTAL` or `NO_WIRE`.
- `speedwire.averaging` – `AveragingProcessor(averaging_time_obis_data,
  averaging_time_speedwire_data)` passes emeter and inverter elements to
  registered consumers only once per averaging interval. Both times are in
  milliseconds; emeter timestamps are in milliseconds, inverter timestamps in
  seconds. Register consumers with `add_obis_consumer` /
  `add_speedwire_consumer`; they need `consume(device, element)` and
  `end_of_obis_data(device, time)` / `end_of_speedwire_data(device, time)`.
  A device is either an integer serial number or an object with a
  `serial_number` attribute.
- `speedwire.localhost` – `LocalHost.get_instance()` returns a shared
  instance caching the host name, local IPv4/IPv6 addresses and
  `InterfaceInfo` records (queried through `psutil`). Lookups such as
  `get_mac_address`, `get_interface_name`, `get_interface_index`,
  `get_interface_prefix_length` and `get_matching_local_ip_address` return
  `None` when nothing matches. Module functions: `query_hostname`,
  `query_local_ip_addresses`, `query_local_interface_infos`, `sleep`,
  `get_tick_count_in_ms`, `get_unix_epoch_time_in_ms`,
  `unix_epoch_time_in_ms_to_string`, `calculate_abs_time_difference` and
  `hexdump`, which prints a hex dump to standard output.
- `speedwire.obis` – `ObisType`, the channel/index/type/tariff identifier of
  an OBIS measurement, with `to_string` (optionally with a 32- or 64-bit
  value), `to_byte_array` (12 bytes, value bytes set to `0xff`) and
  `to_key`.

## Example

```python
from speedwire.address_conversion import reside_on_same_subnet, to_mac_address, mac_to_string
from speedwire.byte_encoding import get_uint32_big_endian, set_uint32_big_endian
from speedwire.obis import ObisType

buf = bytearray(8)
set_uint32_big_endian(buf, 2, 0x12345678)
assert get_uint32_big_endian(buf, 2) == 0x12345678

assert reside_on_same_subnet("192.168.1.10", "192.168.1.200", 24)
print(mac_to_string(to_mac_address("02-00-00-aa-bb-cc")))   # 02:00:00:AA:BB:CC

power = ObisType(0, 1, 4, 0)
print(power.to_string())       # 0.01.4.0
print(hex(power.to_key()))     # 0x10400
```

## What this package does not do

It is a library of building blocks only. It opens no sockets and does not
discover, query or listen to devices on the network; it does not parse or
build speedwire, emeter or inverter packets, does not hold measurement
values for OBIS identifiers, and offers no command-line program.