"""Elementary components: gates, constants, inputs, clock and logger."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from .core import Circuit, Component, Tristate

_INVERSE = {
    Tristate.TRUE: Tristate.FALSE,
    Tristate.FALSE: Tristate.TRUE,
    Tristate.UNDEFINED: Tristate.UNDEFINED,
}


class AndComponent(Component):
    """Two-input AND gate: inputs on pins 1 and 2, output on pin 3."""

    def __init__(self, name: str) -> None:
        super().__init__(3, name)

    def compute(self, pin: int, circuit: Circuit) -> Tristate:
        cached = self._cached(pin, circuit)
        if cached is not None:
            return cached
        self._read_inputs(circuit, 1, 2)
        if pin != 3:
            return Tristate.UNDEFINED
        a, b = self._pins[1].state, self._pins[2].state
        if a is Tristate.TRUE and b is Tristate.TRUE:
            return Tristate.TRUE
        if a is Tristate.FALSE or b is Tristate.FALSE:
            return Tristate.FALSE
        return Tristate.UNDEFINED


class NotComponent(Component):
    """Inverter: input on pin 1, output on pin 2."""

    def __init__(self, name: str) -> None:
        super().__init__(2, name)

    def compute(self, pin: int, circuit: Circuit) -> Tristate:
        cached = self._cached(pin, circuit)
        if cached is not None:
            return cached
        self._read_inputs(circuit, 1)
        if pin != 2:
            return Tristate.UNDEFINED
        return _INVERSE[self._pins[1].state]


class FalseComponent(Component):
    """Constant low level on its single pin."""

    def __init__(self, name: str) -> None:
        super().__init__(1, name)
        self._pins[1].state = Tristate.FALSE

    def compute(self, pin: int, circuit: Circuit) -> Tristate:
        return self._pins[1].state


class InputComponent(Component):
    """A level set from outside the circuit."""

    def __init__(self, name: str) -> None:
        super().__init__(1, name)

    def compute(self, pin: int, circuit: Circuit) -> Tristate:
        return self._pins[pin].state

    def change_pin_state(self, pin: int, new_state: Tristate) -> None:
        self._pins[pin].state = new_state


class ClockComponent(Component):
    """An input that flips its level each time it is read."""

    def __init__(self, name: str) -> None:
        super().__init__(1, name)

    def compute(self, pin: int, circuit: Circuit) -> Tristate:
        return self._pins[pin].state

    def get_pin_state(self, pin: int) -> Tristate:
        """Flip the stored level (unless undefined) and return the new one."""
        clock = self._pins[1]
        clock.state = _INVERSE[clock.state]
        return clock.state

    def change_pin_state(self, pin: int, new_state: Tristate) -> None:
        """Store the inverse of the requested level, to be flipped on read."""
        self._pins[pin].state = _INVERSE[new_state]


class LoggerComponent(Component):
    """Appends one byte to a file when pin 9 is high and pin 10 is low.

    Pins 8 down to 1 give the byte, pin 8 being the most significant bit.
    """

    def __init__(self, name: str, log_path: Union[str, Path] = "log.bin") -> None:
        super().__init__(10, name)
        self.log_path = Path(log_path)

    def compute(self, pin: int, circuit: Circuit) -> Tristate:
        self._read_inputs(circuit, *range(1, 11))
        if (
            self._pins[10].state is Tristate.FALSE
            and self._pins[9].state is Tristate.TRUE
        ):
            value = 0
            for bit in range(8, 0, -1):
                state = self._pins[bit].state
                if state is Tristate.UNDEFINED:
                    return Tristate.UNDEFINED
                value = (value << 1) | (state is Tristate.TRUE)
            with self.log_path.open("ab") as log:
                log.write(bytes([value]))
        return Tristate.UNDEFINED