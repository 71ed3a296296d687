import numpy as np
from numba import njit


def resolve_rng(seed=None):
    """
    Normalise a seed argument into a NumPy random generator.

    Args:
        seed (None, int, np.random.SeedSequence or np.random.Generator): Source of randomness.
            ``None`` draws fresh entropy, a generator is returned unchanged so callers can
            share one stream across several sampling calls.

    Returns:
        np.random.Generator: Generator to draw from.
    """
    if seed is None:
        return np.random.default_rng()
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def spawn_seeds(seed, count):
    """Split *seed* into *count* independent child seed sequences."""
    if isinstance(seed, np.random.Generator):
        seed = int(seed.integers(0, 2**63 - 1))
    return np.random.SeedSequence(seed).spawn(count)


def toBinary(operators):
    """
    Stack Pauli operators into a binary matrix.

    Args:
        operators (list of PauliOperator): Operators of equal length n.

    Returns:
        np.ndarray: uint8 matrix of shape (len(operators), 2n), each row laid out as X bits | Z bits.

    Example:
        >>> toBinary([toPauli("+XZ"), toPauli("-YI")])
        array([[1, 0, 0, 1],
               [1, 0, 1, 0]], dtype=uint8)
    """
    if len(operators) == 0:
        raise ValueError("Input list is empty.")
    length = len(operators[0])
    output = np.zeros((len(operators), 2 * length), dtype=np.uint8)
    for row, op in enumerate(operators):
        if len(op) != length:
            raise ValueError("All operators must act on the same number of qubits.")
        output[row, :length] = op.x
        output[row, length:] = op.z
    return output


@njit(cache=True)
def popcount(bits):
    count = 0
    for i in range(bits.shape[0]):
        if bits[i] != 0:
            count += 1
    return count


def weight(op):
    """Number of qubits on which *op* acts non-trivially."""
    return popcount(op.x | op.z)
