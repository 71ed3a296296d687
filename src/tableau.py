"""Tableau driver: repeated sweeps that build a full random Clifford circuit."""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence

from joblib import Parallel, delayed

try:  # pragma: no cover - handled during package import
    from .circuit import Circuit, Hadamard, Phase, apply_gate
    from .codec import toPauli
    from .core import PauliOperator, commutes, gen_anticommuting_pair
    from .sweep import sweep
    from .util import resolve_rng, spawn_seeds
except ImportError:  # pragma: no cover - legacy import path
    from circuit import Circuit, Hadamard, Phase, apply_gate  # type: ignore
    from codec import toPauli  # type: ignore
    from core import PauliOperator, commutes, gen_anticommuting_pair  # type: ignore
    from sweep import sweep  # type: ignore
    from util import resolve_rng, spawn_seeds  # type: ignore


logger = logging.getLogger(__name__)

# Worked example from figure 5 of van den Berg, "A simple method for sampling
# random Clifford operators" (2021).
FIGURE5_ROWS = ("+XYYX", "+YYYX", "+IZI", "+YYI", "+IX", "+IZ", "+Z", "+X")

# Z on qubit 0 (S.S) flips -X to +X; X on qubit 0 (H.S.S.H) flips -Z to +Z.
_FLIP_X_SIGN = (Phase(0), Phase(0))
_FLIP_Z_SIGN = (Hadamard(0), Phase(0), Phase(0), Hadamard(0))


class Tableau:
    """Pairs of anticommuting rows on shrinking qubit ranges plus the circuit built so far.

    Row pair ``k`` (rows ``2k`` and ``2k + 1``) acts on ``n - k`` qubits and is
    expressed in the frame left behind by the rounds before it. Sweeping it
    and shifting the resulting gates by ``k`` fixes qubit ``k`` for good: later
    rounds only touch higher qubits.

    Attributes
    ----------
    rows:
        The operators, mutated in place as rounds are run.
    circuit:
        Accumulated gates over all ``n`` qubits.
    rounds:
        Offset into ``circuit`` at which each completed round starts.
    """

    def __init__(self, rows: Sequence[PauliOperator]):
        rows = list(rows)
        if len(rows) == 0:
            raise ValueError("Tableau needs at least one pair of rows.")
        if len(rows) % 2 != 0:
            raise ValueError(f"Tableau rows come in pairs, got {len(rows)} rows")
        n_qubits = len(rows[0])
        if len(rows) > 2 * n_qubits:
            raise ValueError(
                f"{len(rows)} rows do not fit a {n_qubits}-qubit tableau (at most {2 * n_qubits})"
            )
        for k in range(len(rows) // 2):
            a, b = rows[2 * k], rows[2 * k + 1]
            expected = n_qubits - k
            if len(a) != expected or len(b) != expected:
                raise ValueError(
                    f"Row pair {k} must act on {expected} qubits, got {len(a)} and {len(b)}"
                )
            if a is b:
                raise ValueError(f"Row pair {k} repeats the same operator object")
            if commutes(a, b):
                raise ValueError(f"Row pair {k} ({a}, {b}) commutes; sweeping needs an anticommuting pair")

        self.rows: List[PauliOperator] = rows
        self.n_qubits = n_qubits
        self.circuit = Circuit()
        self.rounds: List[int] = []

    @classmethod
    def from_strings(cls, strings: Iterable[str]) -> "Tableau":
        return cls([toPauli(s) for s in strings])

    @classmethod
    def random(cls, n_qubits: int, seed=None) -> "Tableau":
        """Tableau of freshly sampled pairs, pair ``k`` drawn on ``n - k`` qubits."""
        if n_qubits < 1:
            raise ValueError(f"Number of qubits must be positive, got {n_qubits}")
        rng = resolve_rng(seed)
        rows: List[PauliOperator] = []
        for k in range(n_qubits):
            rows.extend(gen_anticommuting_pair(n_qubits - k, rng))
        return cls(rows)

    @property
    def position(self) -> int:
        """Index of the next pair to sweep, which is also the next qubit to fix."""
        return len(self.rounds)

    @property
    def done(self) -> bool:
        return 2 * self.position >= len(self.rows)

    def step(self, fix_signs: bool = True) -> Circuit:
        """
        Sweep the next row pair and append its gates to the accumulated circuit.

        Args:
            fix_signs (bool): Also emit the Pauli corrections that leave the pair at
                ``+X_0`` and ``+Z_0`` in its local frame.

        Returns:
            Circuit: The round's gates, already shifted to the full register.
        """
        assert not self.done, 'Tableau has no row pairs left to sweep'
        k = self.position
        a, b = self.rows[2 * k], self.rows[2 * k + 1]
        local = sweep(a, b)
        if fix_signs:
            corrections = []
            if a.sign:
                corrections.extend(_FLIP_X_SIGN)
            if b.sign:
                corrections.extend(_FLIP_Z_SIGN)
            for gate in corrections:
                apply_gate(a, gate)
                apply_gate(b, gate)
            local.extend(corrections)

        shifted = local.shifted(k)
        self.rounds.append(len(self.circuit))
        self.circuit.extend(shifted)
        logger.debug("Round %d fixed qubit %d with %d gates", k, k, len(shifted))
        return shifted

    def run(self, fix_signs: bool = True) -> Circuit:
        while not self.done:
            self.step(fix_signs=fix_signs)
        logger.debug(
            "Tableau on %d qubits finished after %d rounds, %d gates",
            self.n_qubits,
            len(self.rounds),
            len(self.circuit),
        )
        return self.circuit

    def round_circuit(self, k: int) -> Circuit:
        """Gates from round ``k`` onwards; these take row pair ``k`` to ``X_k`` / ``Z_k``."""
        return self.circuit[self.rounds[k]:]


def gen_circuit(n_qubits: int, seed=None, fix_signs: bool = True) -> Circuit:
    """
    Sample a random n-qubit Clifford circuit.

    Args:
        n_qubits (int): Register size, at least 1.
        seed (None, int or np.random.Generator): Source of randomness.
        fix_signs (bool): Emit sign corrections so every pair ends at ``+X`` / ``+Z``.

    Returns:
        Circuit: Gates mapping row pair ``k`` of the sampled tableau to ``X_k`` and ``Z_k``.
    """
    return Tableau.random(n_qubits, seed).run(fix_signs=fix_signs)


def sample_circuits(
    n_qubits: int,
    count: int,
    seed=None,
    fix_signs: bool = True,
    parallel: bool = False,
    n_jobs: int = -1,
) -> List[Circuit]:
    """Sample *count* independent circuits; child seeds are spawned up front so
    sequential and parallel runs with the same seed agree."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    seeds = spawn_seeds(seed, count)
    if parallel:
        return Parallel(n_jobs=n_jobs)(delayed(gen_circuit)(n_qubits, s, fix_signs) for s in seeds)
    return [gen_circuit(n_qubits, s, fix_signs) for s in seeds]

