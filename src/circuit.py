"""Clifford gates and the circuits built from them."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Tuple, Union

try:  # pragma: no cover - handled during package import
    from .core import PauliOperator, apply_cnot, apply_hadamard, apply_phase
except ImportError:  # pragma: no cover - legacy import path
    from core import PauliOperator, apply_cnot, apply_hadamard, apply_phase  # type: ignore


def _check_index(name: str, value: int) -> int:
    value = int(value)
    if value < 0:
        raise ValueError(f"{name} must be a non-negative qubit index, got {value}")
    return value


@dataclass(frozen=True)
class Hadamard:
    qubit: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "qubit", _check_index("qubit", self.qubit))

    @property
    def qubits(self) -> Tuple[int, ...]:
        return (self.qubit,)

    def __str__(self) -> str:
        return f"Hadamard({self.qubit})"


@dataclass(frozen=True)
class Phase:
    qubit: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "qubit", _check_index("qubit", self.qubit))

    @property
    def qubits(self) -> Tuple[int, ...]:
        return (self.qubit,)

    def __str__(self) -> str:
        return f"Phase({self.qubit})"


@dataclass(frozen=True)
class CNot:
    control: int
    target: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "control", _check_index("control", self.control))
        object.__setattr__(self, "target", _check_index("target", self.target))
        if self.control == self.target:
            raise ValueError(f"CNot control and target must differ, got {self.control} twice")

    @property
    def qubits(self) -> Tuple[int, ...]:
        return (self.control, self.target)

    def __str__(self) -> str:
        return f"CNot({self.control}, {self.target})"


@dataclass(frozen=True)
class Swap:
    a: int
    b: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "a", _check_index("a", self.a))
        object.__setattr__(self, "b", _check_index("b", self.b))
        if self.a == self.b:
            raise ValueError(f"Swap needs two distinct qubits, got {self.a} twice")

    @property
    def qubits(self) -> Tuple[int, ...]:
        return (self.a, self.b)

    def __str__(self) -> str:
        return f"Swap({self.a}, {self.b})"


Gate = Union[Hadamard, Phase, CNot, Swap]
GATE_TYPES = (Hadamard, Phase, CNot, Swap)


def apply_gate(op: PauliOperator, gate: Gate) -> None:
    """Conjugate *op* in place by a single gate."""
    if isinstance(gate, Hadamard):
        apply_hadamard(op, gate.qubit)
    elif isinstance(gate, Phase):
        apply_phase(op, gate.qubit)
    elif isinstance(gate, CNot):
        apply_cnot(op, gate.control, gate.target)
    elif isinstance(gate, Swap):
        # Three CNOTs swap the bit pairs; each one carries its own sign update.
        apply_cnot(op, gate.a, gate.b)
        apply_cnot(op, gate.b, gate.a)
        apply_cnot(op, gate.a, gate.b)
    else:
        raise TypeError(f"Unsupported gate {gate!r}")


def shift_gate(gate: Gate, offset: int) -> Gate:
    if isinstance(gate, Hadamard):
        return Hadamard(gate.qubit + offset)
    if isinstance(gate, Phase):
        return Phase(gate.qubit + offset)
    if isinstance(gate, CNot):
        return CNot(gate.control + offset, gate.target + offset)
    if isinstance(gate, Swap):
        return Swap(gate.a + offset, gate.b + offset)
    raise TypeError(f"Unsupported gate {gate!r}")


class Circuit:
    """Ordered, append-only log of Clifford gates.

    Replaying the gates in order on an operator conjugates it by the
    circuit's Clifford, so the log doubles as the transformation itself.
    """

    def __init__(self, gates: Iterable[Gate] = ()):
        self._gates: List[Gate] = []
        self.extend(gates)

    def append(self, gate: Gate) -> None:
        if not isinstance(gate, GATE_TYPES):
            raise TypeError(f"Circuits only hold Clifford gates, got {gate!r}")
        self._gates.append(gate)

    def extend(self, gates: Iterable[Gate]) -> None:
        for gate in gates:
            self.append(gate)

    @property
    def gates(self) -> Tuple[Gate, ...]:
        return tuple(self._gates)

    def __len__(self) -> int:
        return len(self._gates)

    def __iter__(self) -> Iterator[Gate]:
        return iter(self._gates)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Circuit(self._gates[index])
        return self._gates[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Circuit):
            return NotImplemented
        return self._gates == other._gates

    __hash__ = None

    def __repr__(self) -> str:
        return f"Circuit({self._gates!r})"

    def __str__(self) -> str:
        return "\n".join(str(gate) for gate in self._gates)

    @property
    def num_qubits(self) -> int:
        """Smallest register that holds every gate index (0 for an empty circuit)."""
        return max((max(gate.qubits) + 1 for gate in self._gates), default=0)

    def counts(self) -> Dict[str, int]:
        return dict(Counter(type(gate).__name__ for gate in self._gates))

    def apply(self, *operators: PauliOperator) -> None:
        """Replay every gate, in order, on each operator in place."""
        for gate in self._gates:
            for op in operators:
                apply_gate(op, gate)

    def shifted(self, offset: int) -> "Circuit":
        """Copy of the circuit acting on qubits ``offset`` and above."""
        return Circuit(shift_gate(gate, offset) for gate in self._gates)

    def inverse(self) -> "Circuit":
        """Circuit undoing this one. H, CNOT and SWAP are self-inverse; S^-1 = S^3."""
        inverted = Circuit()
        for gate in reversed(self._gates):
            if isinstance(gate, Phase):
                inverted.extend([gate, gate, gate])
            else:
                inverted.append(gate)
        return inverted
