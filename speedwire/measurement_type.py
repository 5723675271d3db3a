"""Classification of measurements: direction, type, quantity, wire and unit."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class _LabelledEnum(enum.Enum):
    def __str__(self):
        return self.value


class Direction(_LabelledEnum):
    """Direction of the energy flow."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    SIGNED = "signed"
    NO_DIRECTION = ""


class Wire(_LabelledEnum):
    """Line, phase or aggregate a measurement refers to."""

    TOTAL = "total"
    L1 = "l1"
    L2 = "l2"
    L3 = "l3"
    L1L2 = "l1l2"
    L2L3 = "l2l3"
    L3L1 = "l3l4"
    MPP_TOTAL = "mpp_total"
    MPP1 = "mpp1"
    MPP2 = "mpp2"
    LOSS_TOTAL = "loss_total"
    GRID_TOTAL = "grid_total"
    DEVICE_OK = "device_ok"
    RELAY_ON = "relay_on"
    FEED_IN = "feed_in"
    SELF_CONSUMPTION = "self_consumption"
    NO_WIRE = ""


class Quantity(_LabelledEnum):
    """Physical quantity of a measurement."""

    POWER = "power"
    ENERGY = "energy"
    POWER_FACTOR = "power_factor"
    FREQUENCY = "frequency"
    VOLTAGE = "voltage"
    CURRENT = "current"
    STATUS = "status"
    EFFICIENCY = "efficiency"
    STATE_OF_CHARGE = "state_of_charge"
    TEMPERATURE = "temperature"
    DURATION = "duration"
    CURRENCY = "currency"
    NO_QUANTITY = ""


class Type(_LabelledEnum):
    """Kind of measurement."""

    ACTIVE = "active"
    REACTIVE = "reactive"
    APPARENT = "apparent"
    NOMINAL = "nominal"
    VERSION = "version"
    END_OF_DATA = "end of data"
    NO_TYPE = ""


def is_instantaneous(quantity):
    """Return True unless the quantity accumulates over time (energy, duration)."""
    return quantity not in (Quantity.ENERGY, Quantity.DURATION)


@dataclass
class MeasurementType:
    """Describes a measurement; values divided by ``divisor`` are in ``unit``."""

    direction: Direction
    type: Type
    quantity: Quantity
    unit: str
    divisor: int
    name: str = field(init=False)
    instantaneous: bool = field(init=False)

    def __post_init__(self):
        self.instantaneous = is_instantaneous(self.quantity)
        direction_part = self.direction.value
        type_part = self.type.value
        quantity_part = self.quantity.value
        if direction_part:
            direction_part += "_"
        if type_part and quantity_part:
            type_part += "_"
        self.name = direction_part + type_part + quantity_part

    def get_full_name(self, wire):
        """Return the name, suffixed with the wire unless it is TOTAL or NO_WIRE."""
        if wire not in (Wire.TOTAL, Wire.NO_WIRE):
            return f"{self.name}_{wire.value}"
        return self.name