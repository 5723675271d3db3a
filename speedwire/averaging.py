"""Temporal averaging gate for emeter and inverter measurement streams."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_UINT32_MASK = 0xFFFFFFFF


class DeviceType(enum.Enum):
    """Source of a measurement stream."""

    EMETER = "emeter"
    INVERTER = "inverter"


@dataclass
class AveragingState:
    """Averaging timer state for one device."""

    serial_number: int
    device_type: DeviceType
    averaging_time: int = 0
    remainder: int = 0
    current_timestamp: int = 0
    current_timestamp_is_valid: bool = False
    averaging_time_reached: bool = False


def _serial_number(device):
    return device if isinstance(device, int) else device.serial_number


class AveragingProcessor:
    """Forwards measurements to consumers only once per averaging period.

    Emeter timestamps are in milliseconds, inverter timestamps in seconds;
    both averaging times are given in milliseconds.
    """

    def __init__(self, averaging_time_obis_data, averaging_time_speedwire_data):
        self.averaging_time_obis_data = averaging_time_obis_data
        self.averaging_time_speedwire_data = averaging_time_speedwire_data
        self.states: dict[int, AveragingState] = {}
        self._obis_consumers = []
        self._speedwire_consumers = []

    def _averaging_time(self, device_type):
        if device_type is DeviceType.EMETER:
            return self.averaging_time_obis_data
        if device_type is DeviceType.INVERTER:
            return self.averaging_time_speedwire_data // 1000
        return 0

    def add_obis_consumer(self, consumer):
        """Register a consumer with ``consume`` and ``end_of_obis_data``."""
        self._obis_consumers.append(consumer)

    def add_speedwire_consumer(self, consumer):
        """Register a consumer with ``consume`` and ``end_of_speedwire_data``."""
        self._speedwire_consumers.append(consumer)

    def process(self, serial_number, device_type, measurement_time):
        """Advance the device's timer; return True if the averaging period elapsed."""
        state = self.states.get(serial_number)
        if state is None:
            state = AveragingState(
                serial_number=serial_number,
                device_type=device_type,
                averaging_time=self._averaging_time(device_type),
            )
            self.states[serial_number] = state

        if state.averaging_time == 0:
            state.averaging_time_reached = True
        elif not state.current_timestamp_is_valid:
            state.averaging_time_reached = False
        elif measurement_time != state.current_timestamp:
            elapsed = (measurement_time - state.current_timestamp) & _UINT32_MASK
            state.remainder = (state.remainder + elapsed) & _UINT32_MASK
            state.averaging_time_reached = state.remainder >= state.averaging_time
            if state.averaging_time_reached:
                state.remainder %= state.averaging_time

        state.current_timestamp = measurement_time
        state.current_timestamp_is_valid = True
        return state.averaging_time_reached

    def consume_obis(self, device, element, measurement_time):
        """Pass an emeter element on if its averaging period elapsed."""
        reached = self.process(_serial_number(device), DeviceType.EMETER, measurement_time)
        if reached:
            for consumer in self._obis_consumers:
                consumer.consume(device, element)
        return reached

    def consume_speedwire(self, device, element, measurement_time):
        """Pass an inverter element on if its averaging period elapsed."""
        reached = self.process(_serial_number(device), DeviceType.INVERTER, measurement_time)
        if reached:
            for consumer in self._speedwire_consumers:
                consumer.consume(device, element)
        return reached

    def _reached(self, device):
        state = self.states.get(_serial_number(device))
        return state is not None and state.averaging_time_reached

    def end_of_obis_data(self, device, time):
        """Signal end of an emeter packet to consumers if the period elapsed."""
        if self._reached(device):
            for consumer in self._obis_consumers:
                consumer.end_of_obis_data(device, time)

    def end_of_speedwire_data(self, device, time):
        """Signal end of an inverter packet to consumers if the period elapsed."""
        if self._reached(device):
            for consumer in self._speedwire_consumers:
                consumer.end_of_speedwire_data(device, time)