"""Core simulation types: tristate values, pins, components and circuits."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass
from typing import Iterator, Optional


class Tristate(enum.Enum):
    """A logic level that may be unknown."""

    UNDEFINED = "U"
    TRUE = "1"
    FALSE = "0"

    def __str__(self) -> str:
        return self.value


@dataclass
class Pin:
    """One pin of a component and the pin it is wired to, if any."""

    state: Tristate = Tristate.UNDEFINED
    linked_component: str = ""
    other_pin: int = 0


class Circuit:
    """A named set of components plus the pins already evaluated this pass."""

    def __init__(self) -> None:
        self.components: dict[str, Component] = {}
        self._computed: set[tuple[str, int]] = set()

    def add(self, component: Component) -> Component:
        """Register a component under its name."""
        if component.name in self.components:
            raise ValueError(f"component '{component.name}' already exists")
        self.components[component.name] = component
        return component

    def get_component(self, name: str) -> Optional[Component]:
        """Return the component with this name, or None."""
        return self.components.get(name)

    def is_computed(self, name: str, pin: int) -> bool:
        return (name, pin) in self._computed

    def mark_computed(self, name: str, pin: int) -> None:
        self._computed.add((name, pin))

    def reset(self) -> None:
        """Forget which pins were evaluated, ready for a new pass."""
        self._computed.clear()

    def __contains__(self, name: object) -> bool:
        return name in self.components

    def __iter__(self) -> Iterator[Component]:
        return iter(self.components.values())

    def __len__(self) -> int:
        return len(self.components)


class Component(abc.ABC):
    """Base class for every component: a name and pins numbered from 1."""

    def __init__(self, pin_count: int, name: str) -> None:
        self.name = name
        self._pins: dict[int, Pin] = {i: Pin() for i in range(1, pin_count + 1)}

    @abc.abstractmethod
    def compute(self, pin: int, circuit: Circuit) -> Tristate:
        """Return the level seen on the given pin."""

    def simulate(self, tick: int) -> None:
        """Advance the component by one tick; nothing happens by default."""

    def set_link(self, pin: int, other_name: str, other_pin: int) -> None:
        """Wire one of this component's pins to a pin of another component."""
        target = self._pins[pin]
        target.linked_component = other_name
        target.other_pin = other_pin

    def get_link(self, pin: int, circuit: Circuit) -> Tristate:
        """Compute the level arriving on a pin from whatever it is wired to."""
        target = self._pins[pin]
        linked = circuit.get_component(target.linked_component)
        if linked is None:
            return Tristate.UNDEFINED
        return linked.compute(target.other_pin, circuit)

    def change_pin_state(self, pin: int, new_state: Tristate) -> None:
        """Set a pin's level from outside; ignored by default."""

    def get_pin_state(self, pin: int) -> Tristate:
        return self._pins[pin].state

    def has_pin(self, pin: int) -> bool:
        return 1 <= pin <= len(self._pins)

    def _cached(self, pin: int, circuit: Circuit) -> Optional[Tristate]:
        """Return the stored level if this pin was already evaluated this pass.

        Otherwise mark it as evaluated and return None.
        """
        if circuit.is_computed(self.name, pin):
            return self._pins[pin].state
        circuit.mark_computed(self.name, pin)
        return None

    def _read_inputs(self, circuit: Circuit, *pins: int) -> None:
        for number in pins:
            self._pins[number].state = self.get_link(number, circuit)