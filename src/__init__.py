import logging

# Import the symplectic Pauli algebra
from .core import (
    Pauli, PauliOperator, I, X, Y, Z,
    apply_hadamard, apply_phase, apply_cnot,
    commutes, symplectic_inner_product, left_pad,
    gen_random, gen_anticommuting_pair
)

# Import gates and circuits
from .circuit import (
    Hadamard, Phase, CNot, Swap, Gate, Circuit, apply_gate
)

# Import the canonicalization sweep and the tableau driver
from .sweep import sweep
from .tableau import (
    Tableau, FIGURE5_ROWS, gen_circuit, sample_circuits
)

# Import text conversions
from .codec import (
    ParseError, toPauli, toString, display, toGate,
    circuit_to_text, circuit_from_text, parse_qubit_count, parse_seed
)

# Import symplectic matrix functions
from .group import (
    symplectic_form, gate_matrix, circuit_matrix, is_symplectic,
    operator_vector, inner_product, rank
)

# Import utility functions
from .util import resolve_rng, toBinary, popcount, weight

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Define what gets imported with "from cliffordtools import *"
__all__ = [
    # Core functions
    'Pauli', 'PauliOperator', 'I', 'X', 'Y', 'Z',
    'apply_hadamard', 'apply_phase', 'apply_cnot',
    'commutes', 'symplectic_inner_product', 'left_pad',
    'gen_random', 'gen_anticommuting_pair',

    # Circuits
    'Hadamard', 'Phase', 'CNot', 'Swap', 'Gate', 'Circuit', 'apply_gate',

    # Sweep and tableau
    'sweep', 'Tableau', 'FIGURE5_ROWS', 'gen_circuit', 'sample_circuits',

    # Text conversions
    'ParseError', 'toPauli', 'toString', 'display', 'toGate',
    'circuit_to_text', 'circuit_from_text', 'parse_qubit_count', 'parse_seed',

    # Group functions
    'symplectic_form', 'gate_matrix', 'circuit_matrix', 'is_symplectic',
    'operator_vector', 'inner_product', 'rank',

    # Utility functions
    'resolve_rng', 'toBinary', 'popcount', 'weight',
]
