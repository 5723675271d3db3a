"""OBIS identifiers as used in emeter packets."""

from __future__ import annotations

from dataclasses import dataclass

_VALUE_WIDTHS = {32: (8, 0xFFFFFFFF), 64: (16, 0xFFFFFFFFFFFFFFFF)}
_VALUE_PLACEHOLDER = b"\xff" * 8


@dataclass(frozen=True)
class ObisType:
    """An OBIS identifier made of channel, index, type and tariff bytes."""

    channel: int
    index: int
    type: int
    tariff: int

    def __post_init__(self):
        for name in ("channel", "index", "type", "tariff"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value <= 0xFF:
                raise ValueError(f"obis {name} must be a byte value, got {value!r}")

    def __str__(self):
        return self.to_string()

    def to_string(self, value=None, bits=32):
        """Return 'c.ii.t.t', optionally followed by a value in hex and decimal.

        ``bits`` selects the hex width of the value: 32 or 64.
        """
        text = f"{self.channel}.{self.index:02d}.{self.type}.{self.tariff}"
        if value is None:
            return text
        try:
            digits, limit = _VALUE_WIDTHS[bits]
        except KeyError:
            raise ValueError(f"unsupported value width: {bits}") from None
        if not 0 <= value <= limit:
            raise ValueError(f"value {value} does not fit into {bits} bits")
        return f"{text} 0x{value:0{digits}x} {value}"

    def to_byte_array(self):
        """Return the 12-byte encoding; the 8 value bytes are filled with 0xff."""
        return bytearray((self.channel, self.index, self.type, self.tariff)) + bytearray(
            _VALUE_PLACEHOLDER
        )

    def to_key(self):
        """Return a 32-bit key packing channel, index, type and tariff, high to low."""
        return (self.channel << 24) | (self.index << 16) | (self.type << 8) | self.tariff