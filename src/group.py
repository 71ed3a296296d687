"""
Symplectic matrices over GF(2) for the Clifford gates.

Operators are column vectors v = (x_0..x_{n-1}, z_0..z_{n-1}). A gate acts as
v -> M v with M in Sp(2n, 2); signs are not represented here.
"""

import numpy as np
from galois import GF2

try:  # pragma: no cover - handled during package import
    from .circuit import CNot, Hadamard, Phase, Swap
    from .util import toBinary
except ImportError:  # pragma: no cover - legacy import path
    from circuit import CNot, Hadamard, Phase, Swap  # type: ignore
    from util import toBinary  # type: ignore


def symplectic_form(n):
    """Returns Omega = [[0, I], [I, 0]] so that v^T Omega w is the symplectic inner product."""
    omega = np.zeros((2 * n, 2 * n), dtype=np.uint8)
    omega[:n, n:] = np.eye(n, dtype=np.uint8)
    omega[n:, :n] = np.eye(n, dtype=np.uint8)
    return GF2(omega)


def gate_matrix(gate, n):
    """
    Symplectic matrix of a single gate on an n-qubit register.

    Args:
        gate (Gate): Hadamard, Phase, CNot or Swap.
        n (int): Number of qubits.

    Returns:
        GF2: 2n x 2n matrix.
    """
    assert max(gate.qubits) < n, f'{gate} does not fit {n} qubits'
    M = np.eye(2 * n, dtype=np.uint8)
    if isinstance(gate, Hadamard):
        q = gate.qubit
        M[q, q] = M[n + q, n + q] = 0
        M[q, n + q] = M[n + q, q] = 1
    elif isinstance(gate, Phase):
        q = gate.qubit
        M[n + q, q] = 1
    elif isinstance(gate, CNot):
        c, t = gate.control, gate.target
        M[t, c] = 1          # x_t += x_c
        M[n + c, n + t] = 1  # z_c += z_t
    elif isinstance(gate, Swap):
        perm = np.arange(2 * n)
        perm[[gate.a, gate.b]] = perm[[gate.b, gate.a]]
        perm[[n + gate.a, n + gate.b]] = perm[[n + gate.b, n + gate.a]]
        M = M[perm]
    else:
        raise TypeError(f"Unsupported gate {gate!r}")
    return GF2(M)


def circuit_matrix(circuit, n):
    """Composes the gate matrices; the first gate of the circuit acts first."""
    M = GF2(np.eye(2 * n, dtype=np.uint8))
    for gate in circuit:
        M = gate_matrix(gate, n) @ M
    return M


def is_symplectic(M):
    n = M.shape[0] // 2
    omega = symplectic_form(n)
    return bool(np.array_equal(M.T @ omega @ M, omega))


def operator_vector(op):
    """GF2 column vector (X bits | Z bits) of a single operator."""
    return GF2(toBinary([op])[0])


def inner_product(operators):
    """
    Pairwise symplectic inner products of a list of equal-length operators.

    Returns:
        GF2: Symmetric matrix, entry (i, j) is 1 iff operators i and j anticommute.
    """
    A = GF2(toBinary(operators))
    n = A.shape[1] // 2
    return A @ symplectic_form(n) @ A.T


def rank(operators):
    """Dimension of the GF(2) span of the operators' symplectic vectors."""
    return int(np.linalg.matrix_rank(GF2(toBinary(operators))))
