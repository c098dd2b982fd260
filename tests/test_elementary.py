import pytest

from nanotekspice.core import Circuit, Tristate
from nanotekspice.elementary import (
    AndComponent,
    ClockComponent,
    FalseComponent,
    InputComponent,
    LoggerComponent,
    NotComponent,
)


def make_circuit(gate):
    """Circuit with the same fixtures the gate tests use, plus the gate."""
    circuit = Circuit()
    circuit.add(InputComponent("input1"))
    circuit.add(InputComponent("input2"))
    for name in ("true1", "true2"):
        source = circuit.add(InputComponent(name))
        source.change_pin_state(1, Tristate.TRUE)
    circuit.add(FalseComponent("false1"))
    circuit.add(FalseComponent("false2"))
    circuit.add(gate)
    return circuit


@pytest.mark.parametrize(
    "source, pin, expected",
    [
        ("false1", 2, "1"),
        ("true1", 2, "0"),
        ("input1", 2, "U"),
        ("false1", 1, "U"),
    ],
)
def test_not_component(source, pin, expected):
    gate = NotComponent("comp1")
    circuit = make_circuit(gate)
    gate.set_link(1, source, 1)
    assert str(gate.compute(pin, circuit)) == expected


def test_not_component_wired_to_itself_terminates():
    gate = NotComponent("comp1")
    circuit = make_circuit(gate)
    gate.set_link(1, "comp1", 2)
    assert gate.compute(2, circuit) is Tristate.UNDEFINED


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("false1", "false2", Tristate.FALSE),
        ("true1", "true2", Tristate.TRUE),
        ("true1", "false2", Tristate.FALSE),
        ("input1", "false2", Tristate.FALSE),
        ("input1", "true2", Tristate.UNDEFINED),
        ("input1", "input2", Tristate.UNDEFINED),
    ],
)
def test_and_component(a, b, expected):
    gate = AndComponent("comp1")
    circuit = make_circuit(gate)
    gate.set_link(1, a, 1)
    gate.set_link(2, b, 1)
    assert gate.compute(3, circuit) is expected


def test_and_component_wrong_pin():
    gate = AndComponent("comp1")
    circuit = make_circuit(gate)
    gate.set_link(1, "true1", 1)
    gate.set_link(2, "true2", 1)
    assert gate.compute(1, circuit) is Tristate.UNDEFINED


def test_and_component_second_read_in_same_pass_uses_stored_pin():
    gate = AndComponent("comp1")
    circuit = make_circuit(gate)
    gate.set_link(1, "true1", 1)
    gate.set_link(2, "true2", 1)
    assert gate.compute(3, circuit) is Tristate.TRUE
    assert gate.compute(3, circuit) is Tristate.UNDEFINED
    circuit.reset()
    assert gate.compute(3, circuit) is Tristate.TRUE


def test_and_component_reads_inputs_into_pins():
    gate = AndComponent("comp1")
    circuit = make_circuit(gate)
    gate.set_link(1, "true1", 1)
    gate.set_link(2, "false1", 1)
    gate.compute(3, circuit)
    assert gate.get_pin_state(1) is Tristate.TRUE
    assert gate.get_pin_state(2) is Tristate.FALSE


def test_false_component_is_always_false():
    comp = FalseComponent("f")
    circuit = Circuit()
    circuit.add(comp)
    assert comp.compute(1, circuit) is Tristate.FALSE
    assert comp.compute(7, circuit) is Tristate.FALSE


def test_input_component_holds_set_value():
    comp = InputComponent("in")
    circuit = Circuit()
    circuit.add(comp)
    assert comp.compute(1, circuit) is Tristate.UNDEFINED
    comp.change_pin_state(1, Tristate.TRUE)
    assert comp.compute(1, circuit) is Tristate.TRUE
    comp.change_pin_state(1, Tristate.FALSE)
    assert comp.get_pin_state(1) is Tristate.FALSE


def test_input_component_unknown_pin_raises():
    comp = InputComponent("in")
    with pytest.raises(KeyError):
        comp.compute(2, Circuit())
    with pytest.raises(KeyError):
        comp.change_pin_state(2, Tristate.TRUE)


def test_clock_starts_undefined_and_stays_so():
    clock = ClockComponent("clk")
    assert clock.get_pin_state(1) is Tristate.UNDEFINED
    assert clock.compute(1, Circuit()) is Tristate.UNDEFINED


def test_clock_stores_inverse_then_flips_on_read():
    clock = ClockComponent("clk")
    circuit = Circuit()
    clock.change_pin_state(1, Tristate.TRUE)
    assert clock.compute(1, circuit) is Tristate.FALSE
    assert clock.get_pin_state(1) is Tristate.TRUE
    assert clock.compute(1, circuit) is Tristate.TRUE
    assert clock.get_pin_state(1) is Tristate.FALSE
    clock.change_pin_state(1, Tristate.UNDEFINED)
    assert clock.compute(1, circuit) is Tristate.UNDEFINED


def logger_circuit(tmp_path, byte, pin9=Tristate.TRUE, pin10=Tristate.FALSE):
    circuit = Circuit()
    logger = circuit.add(LoggerComponent("log", tmp_path / "log.bin"))
    levels = {}
    for bit in range(8):
        levels[bit + 1] = Tristate.TRUE if byte >> bit & 1 else Tristate.FALSE
    levels[9] = pin9
    levels[10] = pin10
    for pin, level in levels.items():
        source = circuit.add(InputComponent(f"in{pin}"))
        source.change_pin_state(1, level)
        logger.set_link(pin, f"in{pin}", 1)
    return circuit, logger


def test_logger_writes_byte(tmp_path):
    circuit, logger = logger_circuit(tmp_path, ord("A"))
    assert logger.compute(1, circuit) is Tristate.UNDEFINED
    assert (tmp_path / "log.bin").read_bytes() == b"A"


def test_logger_appends(tmp_path):
    circuit, logger = logger_circuit(tmp_path, ord("z"))
    logger.compute(1, circuit)
    logger.compute(1, circuit)
    assert (tmp_path / "log.bin").read_bytes() == b"zz"


def test_logger_idle_when_pin10_high(tmp_path):
    circuit, logger = logger_circuit(tmp_path, ord("A"), pin10=Tristate.TRUE)
    logger.compute(1, circuit)
    assert not (tmp_path / "log.bin").exists()


def test_logger_idle_when_pin9_low(tmp_path):
    circuit, logger = logger_circuit(tmp_path, ord("A"), pin9=Tristate.FALSE)
    logger.compute(1, circuit)
    assert not (tmp_path / "log.bin").exists()


def test_logger_skips_undefined_bit(tmp_path):
    circuit, logger = logger_circuit(tmp_path, ord("A"))
    circuit.get_component("in4").change_pin_state(1, Tristate.UNDEFINED)
    assert logger.compute(1, circuit) is Tristate.UNDEFINED
    assert not (tmp_path / "log.bin").exists()