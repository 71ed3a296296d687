import logging
from dataclasses import dataclass

import numpy as np
from numba import njit

try:  # pragma: no cover - handled during package import
    from .util import resolve_rng, popcount
except ImportError:  # pragma: no cover - legacy import path
    from util import resolve_rng, popcount  # type: ignore


logger = logging.getLogger(__name__)

_LETTERS = {(0, 0): 'I', (0, 1): 'Z', (1, 0): 'X', (1, 1): 'Y'}


@dataclass(frozen=True)
class Pauli:
    """Single-qubit Pauli operator stored as its symplectic bit pair.

    Attributes
    ----------
    x:
        X component, 0 or 1.
    z:
        Z component, 0 or 1.

    ``(0, 0) = I``, ``(0, 1) = Z``, ``(1, 0) = X`` and ``(1, 1) = Y``.
    """

    x: int
    z: int

    def __post_init__(self) -> None:
        for name in ("x", "z"):
            value = int(getattr(self, name))
            if value not in (0, 1):
                raise ValueError(f"{name} bit must be 0 or 1, got {value}")
            object.__setattr__(self, name, value)

    def hadamard(self) -> "Pauli":
        """H: swaps the X and Z bits."""
        return Pauli(self.z, self.x)

    def phase(self) -> "Pauli":
        """S: adds the X bit into the Z bit."""
        return Pauli(self.x, self.x ^ self.z)

    def cnot(self, other: "Pauli"):
        """CX with *self* as control and *other* as target.

        Returns:
            tuple: (new control, new target).
        """
        return (
            Pauli(self.x, self.z ^ other.z),
            Pauli(self.x ^ other.x, other.z),
        )

    @classmethod
    def random(cls, seed=None) -> "Pauli":
        rng = resolve_rng(seed)
        x_bit, z_bit = rng.integers(0, 2, size=2)
        return cls(x_bit, z_bit)

    def __str__(self) -> str:
        return _LETTERS[(self.x, self.z)]


I = Pauli(0, 0)
Z = Pauli(0, 1)
X = Pauli(1, 0)
Y = Pauli(1, 1)


# ----------------------------------------------------------------------
# Numba kernels. Each mutates the bit arrays in place and returns the
# bit that has to be xor-ed into the operator sign.
# ----------------------------------------------------------------------


@njit(cache=True)
def _hadamard_nb(x_bits, z_bits, qubit):
    flip = x_bits[qubit] & z_bits[qubit]
    tmp = x_bits[qubit]
    x_bits[qubit] = z_bits[qubit]
    z_bits[qubit] = tmp
    return flip


@njit(cache=True)
def _phase_nb(x_bits, z_bits, qubit):
    flip = x_bits[qubit] & z_bits[qubit]
    z_bits[qubit] = x_bits[qubit] ^ z_bits[qubit]
    return flip


@njit(cache=True)
def _cnot_nb(x_bits, z_bits, control, target):
    xa = x_bits[control]
    za = z_bits[control]
    xb = x_bits[target]
    zb = z_bits[target]
    flip = xa & zb & (1 ^ xb ^ za)
    z_bits[control] = za ^ zb
    x_bits[target] = xa ^ xb
    return flip


@njit(cache=True)
def _anticommuting_positions_nb(x1, z1, x2, z2):
    # Two single-qubit Paulis anticommute iff they differ and neither is I.
    total = 0
    for i in range(x1.shape[0]):
        differ = x1[i] != x2[i] or z1[i] != z2[i]
        if differ and (x1[i] | z1[i]) != 0 and (x2[i] | z2[i]) != 0:
            total += 1
    return total


def _as_bits(values, name):
    arr = np.array(values, dtype=np.uint8).reshape(-1)
    if np.any(arr > 1):
        raise ValueError(f"{name} bits must contain only 0/1 values.")
    return np.ascontiguousarray(arr)


class PauliOperator:
    """Signed n-qubit Pauli string ``(-1)**sign * P_0 (x) ... (x) P_{n-1}``.

    Args:
        x (array-like): X bit of every qubit.
        z (array-like): Z bit of every qubit, same length as ``x``.
        sign (int or bool): 0 for ``+``, 1 for ``-``.

    The bit arrays are copied on construction; gate methods mutate the
    operator in place.
    """

    __slots__ = ("x", "z", "sign")

    def __init__(self, x, z, sign=0):
        self.x = _as_bits(x, "X")
        self.z = _as_bits(z, "Z")
        if self.x.shape != self.z.shape:
            raise ValueError(
                f"X and Z bits must have the same length, got {self.x.size} and {self.z.size}"
            )
        self.sign = int(sign) & 1

    @classmethod
    def identity(cls, n_qubits, sign=0):
        return cls(np.zeros(n_qubits, dtype=np.uint8), np.zeros(n_qubits, dtype=np.uint8), sign)

    @classmethod
    def from_paulis(cls, paulis, sign=0):
        paulis = list(paulis)
        return cls([p.x for p in paulis], [p.z for p in paulis], sign)

    def copy(self):
        return PauliOperator(self.x, self.z, self.sign)

    @property
    def n_qubits(self):
        return int(self.x.size)

    def __len__(self):
        return int(self.x.size)

    def __getitem__(self, qubit):
        return Pauli(self.x[qubit], self.z[qubit])

    def __setitem__(self, qubit, pauli):
        self.x[qubit] = pauli.x
        self.z[qubit] = pauli.z

    def __iter__(self):
        for qubit in range(len(self)):
            yield self[qubit]

    def __eq__(self, other):
        if not isinstance(other, PauliOperator):
            return NotImplemented
        return (
            self.sign == other.sign
            and np.array_equal(self.x, other.x)
            and np.array_equal(self.z, other.z)
        )

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def pattern(self):
        """Pauli letters without the sign, e.g. ``'XIZ'``."""
        return ''.join(str(p) for p in self)

    def is_identity(self):
        return popcount(self.x | self.z) == 0

    def __str__(self):
        return ('-' if self.sign else '+') + self.pattern()

    def __repr__(self):
        return f"PauliOperator('{self}')"

    # ------------------------------------------------------------------
    # Clifford conjugation
    # ------------------------------------------------------------------
    def hadamard(self, qubit):
        apply_hadamard(self, qubit)

    def phase(self, qubit):
        apply_phase(self, qubit)

    def cnot(self, control, target):
        apply_cnot(self, control, target)

    def commutes(self, other):
        return commutes(self, other)


def _check_qubit(op, qubit):
    assert 0 <= qubit < len(op), f'Qubit index {qubit} out of range for {len(op)} qubits'


def apply_hadamard(op, qubit):
    """Conjugate *op* by H on *qubit*: X <-> Z, Y -> -Y."""
    _check_qubit(op, qubit)
    op.sign ^= int(_hadamard_nb(op.x, op.z, qubit))


def apply_phase(op, qubit):
    """Conjugate *op* by S on *qubit*: X -> Y, Y -> -X, Z -> Z."""
    _check_qubit(op, qubit)
    op.sign ^= int(_phase_nb(op.x, op.z, qubit))


def apply_cnot(op, control, target):
    """Conjugate *op* by CX(control, target), tracking the sign flip of the pair."""
    _check_qubit(op, control)
    _check_qubit(op, target)
    assert control != target, 'CNOT control and target must differ'
    op.sign ^= int(_cnot_nb(op.x, op.z, control, target))


def commutes(op1, op2):
    """
    Determine whether two Pauli operators commute.

    Args:
        op1 (PauliOperator): First operator.
        op2 (PauliOperator): Second operator, same length as the first.

    Returns:
        bool: True if ``op1 op2 == op2 op1``, False if they anticommute.
    """
    assert len(op1) == len(op2), 'Cannot compare operators of different lengths'
    total = _anticommuting_positions_nb(op1.x, op1.z, op2.x, op2.z)
    return total % 2 == 0


def symplectic_inner_product(op1, op2):
    """
    Compute the symplectic inner product ``x1.z2 + z1.x2 mod 2`` of two operators.

    Returns:
        int: 0 if the operators commute, 1 if they anticommute.
    """
    assert len(op1) == len(op2), 'Cannot compare operators of different lengths'
    x1 = op1.x.astype(np.int64)
    z1 = op1.z.astype(np.int64)
    return int((np.dot(x1, op2.z) + np.dot(z1, op2.x)) % 2)


def left_pad(op, result_size):
    """Left pads the operator to cover more qubit indices. Keeps the order of the original
    units, and adds I's at the smaller indices.

    Args:
        op (PauliOperator): Operator to pad.
        result_size (int): New length of the operator.

    Returns:
        PauliOperator: Padded copy with the same sign.
    """
    assert len(op) <= result_size, 'Cannot left pad to a smaller size'
    shift_amount = result_size - len(op)
    x_bits = np.zeros(result_size, dtype=np.uint8)
    z_bits = np.zeros(result_size, dtype=np.uint8)
    x_bits[shift_amount:] = op.x
    z_bits[shift_amount:] = op.z
    return PauliOperator(x_bits, z_bits, op.sign)


def gen_random(n_qubits, seed=None):
    """
    Draw a random n-qubit operator. Every unit is two independent fair bits and the
    sign is an independent fair bit; the result may be the identity.
    """
    rng = resolve_rng(seed)
    bits = rng.integers(0, 2, size=(2, n_qubits), dtype=np.uint8)
    sign = int(rng.integers(0, 2))
    return PauliOperator(bits[0], bits[1], sign)


def gen_anticommuting_pair(n_qubits, seed=None):
    """
    Sample a pair of anticommuting n-qubit operators by rejection.

    ``a`` is redrawn until it is not the identity, ``b`` is drawn freely and the
    pair is kept only if the two anticommute.

    Args:
        n_qubits (int): Number of qubits, at least 1.
        seed (None, int or np.random.Generator): Source of randomness.

    Returns:
        tuple: (a, b) with ``commutes(a, b) == False``.
    """
    if n_qubits < 1:
        raise ValueError(f"Anticommuting pairs need at least one qubit, got {n_qubits}")
    rng = resolve_rng(seed)
    rejected = 0
    while True:
        a = gen_random(n_qubits, rng)
        while a.is_identity():
            a = gen_random(n_qubits, rng)
        b = gen_random(n_qubits, rng)
        if not commutes(a, b):
            logger.debug("Sampled anticommuting pair on %d qubits after %d rejections", n_qubits, rejected)
            return a, b
        rejected += 1
