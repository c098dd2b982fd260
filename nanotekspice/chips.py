"""CMOS 4000-series chips built from the elementary logic rules."""

from __future__ import annotations

from typing import Callable, ClassVar, Optional

from .core import Circuit, Component, Tristate

T = Tristate.TRUE
F = Tristate.FALSE
U = Tristate.UNDEFINED

Gate = Callable[[Tristate, Tristate], Tristate]


def _nor(a: Tristate, b: Tristate) -> Tristate:
    if a is T or b is T:
        return F
    if a is F and b is F:
        return T
    return U


def _nand(a: Tristate, b: Tristate) -> Tristate:
    if a is T and b is T:
        return F
    if a is F or b is F:
        return T
    return U


def _xor(a: Tristate, b: Tristate) -> Tristate:
    if a is T and b is T:
        return F
    if a is U or b is U:
        return U
    if a is F and b is F:
        return F
    return T


def _or(a: Tristate, b: Tristate) -> Tristate:
    if a is T or b is T:
        return T
    if a is F and b is F:
        return F
    return U


def _and(a: Tristate, b: Tristate) -> Tristate:
    if a is T and b is T:
        return T
    if a is F or b is F:
        return F
    return U


def _not(a: Tristate) -> Tristate:
    if a is T:
        return F
    if a is F:
        return T
    return U


def _bits(*states: Tristate) -> Optional[list[bool]]:
    if any(state is U for state in states):
        return None
    return [state is T for state in states]


def _carry(a: Tristate, b: Tristate, c: Tristate) -> Tristate:
    """Carry out of a one-bit full adder."""
    bits = _bits(a, b, c)
    if bits is None:
        return U
    return T if sum(bits) >= 2 else F


def _sum(a: Tristate, b: Tristate, c: Tristate) -> Tristate:
    """Sum bit of a one-bit full adder."""
    bits = _bits(a, b, c)
    if bits is None:
        return U
    return T if sum(bits) % 2 else F


class _QuadGateChip(Component):
    """Four independent two-input gates in a 14-pin package."""

    _INPUTS: ClassVar[tuple[int, ...]] = (1, 2, 5, 6, 8, 9, 12, 13)
    _OUTPUTS: ClassVar[dict[int, tuple[int, int]]] = {
        3: (1, 2),
        4: (5, 6),
        10: (8, 9),
        11: (12, 13),
    }
    _gate: ClassVar[Gate]

    def __init__(self, name: str) -> None:
        super().__init__(14, name)

    def compute(self, pin: int, circuit: Circuit) -> Tristate:
        cached = self._cached(pin, circuit)
        if cached is not None:
            return cached
        self._read_inputs(circuit, *self._INPUTS)
        inputs = self._OUTPUTS.get(pin)
        if inputs is None:
            return U
        first, second = inputs
        return type(self)._gate(self._pins[first].state, self._pins[second].state)


class C4001Component(_QuadGateChip):
    """Quad two-input NOR gate."""

    _gate = staticmethod(_nor)

    def __init__(self, name: str) -> None:
        super().__init__(name)

    def compute(self, pin: int, circuit: Circuit) -> Tristate:
        return super().compute(pin, circuit)


class C4011Component(_QuadGateChip):
    """Quad two-input NAND gate."""

    _gate = staticmethod(_nand)

    def __init__(self, name: str) -> None:
        super().__init__(name)

    def compute(self, pin: int, circuit: Circuit) -> Tristate:
        return super().compute(pin, circuit)


class C4030Component(_QuadGateChip):
    """Quad two-input XOR gate."""

    _gate = staticmethod(_xor)

    def __init__(self, name: str) -> None:
        super().__init__(name)

    def compute(self, pin: int, circuit: Circuit) -> Tristate:
        return super().compute(pin, circuit)


class C4071Component(_QuadGateChip):
    """Quad two-input OR gate."""

    _gate = staticmethod(_or)

    def __init__(self, name: str) -> None:
        super().__init__(name)

    def compute(self, pin: int, circuit: Circuit) -> Tristate:
        return super().compute(pin, circuit)


class C4081Component(_QuadGateChip):
    """Quad two-input AND gate."""

    _gate = staticmethod(_and)

    def __init__(self, name: str) -> None:
        super().__init__(name)

    def compute(self, pin: int, circuit: Circuit) -> Tristate:
        return super().compute(pin, circuit)


class C4069Component(Component):
    """Hex inverter."""

    _INPUTS = (1, 3, 5, 13, 11, 9)
    _OUTPUTS = {2: 1, 4: 3, 6: 5, 8: 9, 10: 11, 12: 13}

    def __init__(self, name: str) -> None:
        super().__init__(14, name)

    def compute(self, pin: int, circuit: Circuit) -> Tristate:
        cached = self._cached(pin, circuit)
        if cached is not None:
            return cached
        self._read_inputs(circuit, *self._INPUTS)
        source = self._OUTPUTS.get(pin)
        if source is None:
            return U
        return _not(self._pins[source].state)


class C4008Component(Component):
    """Four-bit full adder.

    Bit pairs (A, B) from least to most significant are on pins (7, 6),
    (5, 4), (3, 2) and (1, 15); carry in is pin 9. Sum bits come out on
    pins 10 to 13 and the carry out on pin 14.
    """

    _INPUTS = (15, 1, 2, 3, 4, 5, 6, 7, 9)

    def __init__(self, name: str) -> None:
        super().__init__(15, name)

    def compute(self, pin: int, circuit: Circuit) -> Tristate:
        cached = self._cached(pin, circuit)
        if cached is not None:
            return cached
        self._read_inputs(circuit, *self._INPUTS)
        s = {number: self._pins[number].state for number in self._INPUTS}
        carry1 = _carry(s[6], s[7], s[9])
        carry2 = _carry(s[4], s[5], carry1)
        carry3 = _carry(s[2], s[3], carry2)
        outputs = {
            10: lambda: _sum(s[6], s[7], s[9]),
            11: lambda: _sum(s[4], s[5], carry1),
            12: lambda: _sum(s[2], s[3], carry2),
            13: lambda: _sum(s[15], s[1], carry3),
            14: lambda: _carry(s[15], s[1], carry3),
        }
        output = outputs.get(pin)
        return output() if output is not None else U