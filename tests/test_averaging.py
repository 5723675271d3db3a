from dataclasses import dataclass

from speedwire.averaging import AveragingProcessor, DeviceType


@dataclass
class Device:
    serial_number: int


class Recorder:
    def __init__(self):
        self.consumed = []
        self.ends = []

    def consume(self, device, element):
        self.consumed.append((device.serial_number, element))

    def end_of_obis_data(self, device, time):
        self.ends.append(("obis", device.serial_number, time))

    def end_of_speedwire_data(self, device, time):
        self.ends.append(("speedwire", device.serial_number, time))


def test_zero_averaging_always_passes():
    proc = AveragingProcessor(0, 0)
    assert proc.process(1, DeviceType.EMETER, 100) is True
    assert proc.process(1, DeviceType.EMETER, 100) is True


def test_emeter_period_elapses():
    proc = AveragingProcessor(1000, 0)
    assert proc.process(7, DeviceType.EMETER, 1000) is False
    assert proc.process(7, DeviceType.EMETER, 1500) is False
    assert proc.process(7, DeviceType.EMETER, 2000) is True
    assert proc.states[7].remainder == 0
    # same timestamp keeps the reached flag
    assert proc.process(7, DeviceType.EMETER, 2000) is True
    assert proc.process(7, DeviceType.EMETER, 2100) is False


def test_remainder_carries_over():
    proc = AveragingProcessor(1000, 0)
    proc.process(3, DeviceType.EMETER, 0)
    assert proc.process(3, DeviceType.EMETER, 1300) is True
    assert proc.states[3].remainder == 300
    assert proc.process(3, DeviceType.EMETER, 2000) is True


def test_inverter_time_in_seconds():
    proc = AveragingProcessor(0, 5000)
    assert proc.states == {}
    proc.process(9, DeviceType.INVERTER, 10)
    assert proc.states[9].averaging_time == 5
    assert proc.process(9, DeviceType.INVERTER, 14) is False
    assert proc.process(9, DeviceType.INVERTER, 15) is True


def test_timestamp_wraparound():
    proc = AveragingProcessor(10, 0)
    proc.process(1, DeviceType.EMETER, 0xFFFFFFFF)
    assert proc.process(1, DeviceType.EMETER, 9) is True


def test_devices_are_independent():
    proc = AveragingProcessor(1000, 0)
    proc.process(1, DeviceType.EMETER, 0)
    proc.process(2, DeviceType.EMETER, 0)
    assert proc.process(1, DeviceType.EMETER, 1000) is True
    assert proc.states[2].averaging_time_reached is False


def test_consume_obis_forwards_only_when_reached():
    proc = AveragingProcessor(1000, 0)
    recorder = Recorder()
    proc.add_obis_consumer(recorder)
    dev = Device(42)
    assert proc.consume_obis(dev, "a", 0) is False
    proc.end_of_obis_data(dev, 0)
    assert recorder.consumed == [] and recorder.ends == []
    assert proc.consume_obis(dev, "b", 1000) is True
    proc.end_of_obis_data(dev, 1000)
    assert recorder.consumed == [(42, "b")]
    assert recorder.ends == [("obis", 42, 1000)]


def test_consume_speedwire_forwards_to_speedwire_consumers_only():
    proc = AveragingProcessor(0, 0)
    obis = Recorder()
    inverter = Recorder()
    proc.add_obis_consumer(obis)
    proc.add_speedwire_consumer(inverter)
    dev = Device(5)
    assert proc.consume_speedwire(dev, "x", 1) is True
    proc.end_of_speedwire_data(dev, 1)
    assert inverter.consumed == [(5, "x")]
    assert inverter.ends == [("speedwire", 5, 1)]
    assert obis.consumed == [] and obis.ends == []


def test_end_of_data_for_unknown_device_is_ignored():
    proc = AveragingProcessor(0, 0)
    recorder = Recorder()
    proc.add_obis_consumer(recorder)
    proc.add_speedwire_consumer(recorder)
    proc.end_of_obis_data(Device(99), 0)
    proc.end_of_speedwire_data(Device(99), 0)
    assert recorder.ends == []