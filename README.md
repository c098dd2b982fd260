# nanotekspice

A small library for evaluating digital circuits built from tristate logic.
Every pin carries one of three levels: `1`, `0` or `U` (undefined). A pin
that is not driven is undefined, and undefined inputs spread through gates
the way real logic does: `0 AND U` is `0`, but `1 AND U` is `U`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Building blocks

### `nanotekspice.core`

- `Tristate` is an enum with the members `TRUE`, `FALSE` and `UNDEFINED`.
  `str()` gives `1`, `0` or `U`.
- `Pin` is a dataclass holding a pin's `state` and the component name and pin
  number it is wired to.
- `Component` is the abstract base of every part. Its pins are numbered from 1.
  - `set_link(pin, other_name, other_pin)` wires a pin to a pin of another part.
  - `get_link(pin, circuit)` computes the level arriving on a pin; an unwired
    pin, or one wired to a name not in the circuit, gives `UNDEFINED`.
  - `compute(pin, circuit)` returns the level on a pin.
  - `get_pin_state(pin)` returns a pin's stored level.
  - `change_pin_state(pin, new_state)` and `simulate(tick)` do nothing unless
    a part overrides them.
  - `has_pin(pin)` tells whether a pin number exists on the part.
- `Circuit` holds components by name.
  - `add(component)` registers a component and returns it; a second component
    with the same name raises `ValueError`.
  - `get_component(name)` returns the component, or `None`.
  - `name in circuit`, `len(circuit)` and iterating over the components work.
  - It records which pins have been evaluated in the current pass
    (`is_computed`, `mark_computed`), so that wiring loops do not recurse
    forever. A pin evaluated a second time in the same pass returns its stored
    level. Call `reset()` before each new pass.

### `nanotekspice.elementary`

- `InputComponent`: one pin, set from outside with `change_pin_state`.
- `FalseComponent`: one pin, always `0`.
- `ClockComponent`: one pin. `change_pin_state` stores the inverse of the
  level given, and each call to `get_pin_state` flips the stored level and
  returns it (an undefined clock stays undefined). `compute` returns the
  stored level without flipping it.
- `AndComponent`: inputs on pins 1 and 2, output on pin 3.
- `NotComponent`: input on pin 1, output on pin 2.
- `LoggerComponent(name, log_path="log.bin")`: ten inputs. When computed with
  pin 9 high and pin 10 low, it appends one byte to `log_path`, built from
  pins 8 (most significant bit) down to 1. If any of those bits is undefined,
  nothing is written. `compute` always returns `UNDEFINED`.

### `nanotekspice.chips`

| Class | Chip | Outputs |
|-------|------|---------|
| `C4001Component` | quad NOR | 3 (1, 2), 4 (5, 6), 10 (8, 9), 11 (12, 13) |
| `C4011Component` | quad NAND | same pinout as 4001 |
| `C4030Component` | quad XOR | same pinout as 4001 |
| `C4071Component` | quad OR | same pinout as 4001 |
| `C4081Component` | quad AND | same pinout as 4001 |
| `C4069Component` | hex inverter | 2←1, 4←3, 6←5, 8←9, 10←11, 12←13 |
| `C4008Component` | 4-bit full adder | sums on 10–13, carry out on 14 |

The 4008 takes its bit pairs, least significant first, on pins (7, 6),
(5, 4), (3, 2) and (1, 15), with carry in on pin 9.

Pins with no output behind them, such as pin 7 of a 4001, compute to `U`.

## Example

```python
from nanotekspice.core import Circuit, Tristate
from nanotekspice.elementary import FalseComponent, InputComponent
from nanotekspice.chips import C4001Component

circuit = Circuit()
circuit.add(InputComponent("in"))
circuit.add(FalseComponent("low"))
nor = circuit.add(C4001Component("nor"))

nor.set_link(1, "low", 1)
nor.set_link(2, "in", 1)

print(nor.compute(3, circuit))   # U: the input has not been set yet

circuit.get_component("in").change_pin_state(1, Tristate.TRUE)
circuit.reset()
print(nor.compute(3, circuit))   # 0
```

## What this package does not do

It is a library only. It has no command to run, no interactive shell, and no
reader for circuit description files: circuits are built in Python with
`Circuit.add` and `Component.set_link`. There is no tick-driven simulation
loop either; `simulate` does nothing, and each evaluation pass is started by
calling `reset()` and then `compute`. Among the elementary parts there is no
constant-high, OR, XOR or output component.