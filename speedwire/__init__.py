"""Building blocks for SMA speedwire devices: byte encoding, addresses, logging, measurement types, OBIS identifiers, averaging and local host information."""

__version__ = "0.1.0"