import logging

import numpy as np

try:  # pragma: no cover - handled during package import
    from .circuit import Circuit, CNot, Hadamard, Phase, Swap, apply_gate
except ImportError:  # pragma: no cover - legacy import path
    from circuit import Circuit, CNot, Hadamard, Phase, Swap, apply_gate  # type: ignore


logger = logging.getLogger(__name__)


class _Recorder:
    """Appends each gate to a circuit while conjugating both operators by it."""

    def __init__(self, a, b):
        self.a = a
        self.b = b
        self.circuit = Circuit()

    def __call__(self, gate):
        self.circuit.append(gate)
        apply_gate(self.a, gate)
        apply_gate(self.b, gate)


def _clear_z(op, emit):
    """Rotate every Z component of *op* away: S turns Y into X, H turns Z into X."""
    for qubit in np.flatnonzero(op.z):
        qubit = int(qubit)
        if op.x[qubit]:
            emit(Phase(qubit))
        else:
            emit(Hadamard(qubit))


def _reduce_x(op, emit):
    """
    Fold the X support of a Z-free operator onto a single qubit.

    Consecutive support indices are paired up and the CNOT clears the target's
    X bit; an odd trailing index is left for the next round, so the support
    shrinks to ceil(k / 2) every pass.

    Returns:
        int: The qubit holding the surviving X bit (always the lowest index of the initial support).
    """
    while True:
        support = np.flatnonzero(op.x)
        assert support.size > 0, 'X support vanished while reducing a non-identity operator'
        if support.size == 1:
            return int(support[0])
        for control, target in zip(support[0::2], support[1::2]):
            emit(CNot(int(control), int(target)))


def _is_canonical_z(op):
    return op.z[0] == 1 and op.x[0] == 0 and not op.x[1:].any() and not op.z[1:].any()


def sweep(a, b):
    """
    Reduce an anticommuting pair to ``a ~ X_0`` and ``b ~ Z_0``.

    Both operators are conjugated in place by every emitted gate, so their
    relationship is preserved throughout. Patterns end canonical; signs are
    tracked but not fixed.

    Args:
        a (PauliOperator): First operator, not the identity.
        b (PauliOperator): Second operator, anticommuting with ``a`` (not re-checked).

    Returns:
        Circuit: The gates applied, in order.
    """
    assert a is not b, 'sweep needs two distinct operators'
    assert len(a) == len(b), 'Cannot sweep operators of different lengths'
    assert len(a) >= 1, 'Cannot sweep zero-qubit operators'

    emit = _Recorder(a, b)

    _clear_z(a, emit)
    first_position = _reduce_x(a, emit)
    if first_position != 0:
        emit(Swap(0, first_position))
    logger.debug("a reduced to X_0 with %d gates", len(emit.circuit))

    if _is_canonical_z(b):
        return emit.circuit

    emit(Hadamard(0))
    _clear_z(b, emit)
    survivor = _reduce_x(b, emit)
    assert survivor == 0, f'X bit of b survived on qubit {survivor} instead of 0'
    emit(Hadamard(0))
    logger.debug("b reduced to Z_0, sweep emitted %d gates", len(emit.circuit))
    return emit.circuit
