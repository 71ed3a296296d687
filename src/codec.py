"""Text forms of Pauli operators and circuits."""

import re

import numpy as np

try:  # pragma: no cover - handled during package import
    from .circuit import Circuit, CNot, Hadamard, Phase, Swap
    from .core import PauliOperator
except ImportError:  # pragma: no cover - legacy import path
    from circuit import Circuit, CNot, Hadamard, Phase, Swap  # type: ignore
    from core import PauliOperator  # type: ignore


class ParseError(ValueError):
    """Raised when operator, gate or qubit-count text is malformed."""


_X_BITS = {'I': 0, 'X': 1, 'Y': 1, 'Z': 0}
_Z_BITS = {'I': 0, 'X': 0, 'Y': 1, 'Z': 1}

_GATE_PATTERN = re.compile(r"^\s*([A-Za-z]+)\s*\(([^()]*)\)\s*$")
_GATES = {
    'Hadamard': (Hadamard, 1),
    'Phase': (Phase, 1),
    'CNot': (CNot, 2),
    'Swap': (Swap, 2),
}


def toPauli(text):
    """
    Parse a signed Pauli string such as ``'+XYZI'`` or ``'-ZZ'``.

    Args:
        text (str): One sign character followed by one of I, X, Y, Z per qubit.

    Returns:
        PauliOperator: The operator; qubit i is the (i+1)-th character.

    Raises:
        ParseError: On a missing or invalid sign, an empty body or a letter outside IXYZ.
    """
    if not isinstance(text, str):
        raise ParseError(f"Expected a Pauli string, got {type(text).__name__}")
    if len(text) == 0 or text[0] not in '+-':
        raise ParseError(f"Pauli string {text!r} must start with '+' or '-'")
    body = text[1:]
    if len(body) == 0:
        raise ParseError(f"Pauli string {text!r} has no qubits")
    for position, letter in enumerate(body):
        if letter not in _X_BITS:
            raise ParseError(
                f"Invalid Pauli character {letter!r} at qubit {position} in {text!r}. Only 'I', 'X', 'Y', 'Z' are allowed."
            )
    x_bits = np.fromiter((_X_BITS[ch] for ch in body), dtype=np.uint8, count=len(body))
    z_bits = np.fromiter((_Z_BITS[ch] for ch in body), dtype=np.uint8, count=len(body))
    return PauliOperator(x_bits, z_bits, text[0] == '-')


def toString(op):
    """
    Convert an operator back to its signed Pauli string.

    Example:
        >>> toString(toPauli("-IXYZ"))
        '-IXYZ'
    """
    return ('-' if op.sign else '+') + op.pattern()


def display(op):
    """Signed string followed by the X and Z bit rows, e.g. ``'+XY - X X | _ Z'``."""
    x_row = ' '.join('X' if bit else '_' for bit in op.x)
    z_row = ' '.join('Z' if bit else '_' for bit in op.z)
    return f"{toString(op)} - {x_row} | {z_row}"


def _parse_int(text, what):
    text = text.strip()
    if not re.fullmatch(r"[+]?\d+", text):
        raise ParseError(f"Malformed {what} {text!r}: expected a non-negative integer")
    return int(text)


def parse_qubit_count(text):
    """Parse the qubit count argument of the command line driver."""
    return _parse_int(str(text), "qubit count")


def parse_seed(text):
    """Parse a random seed; numpy only accepts non-negative integer seeds."""
    return _parse_int(str(text), "seed")


def toGate(text):
    """Parse one ``GateName(args)`` line, e.g. ``'CNot(0, 2)'``."""
    match = _GATE_PATTERN.match(text)
    if match is None:
        raise ParseError(f"Malformed gate {text!r}: expected GateName(args)")
    name, args = match.groups()
    if name not in _GATES:
        raise ParseError(f"Unknown gate {name!r}. Known gates: {', '.join(_GATES)}")
    gate_type, arity = _GATES[name]
    values = [_parse_int(arg, "qubit index") for arg in args.split(',')] if args.strip() else []
    if len(values) != arity:
        raise ParseError(f"{name} takes {arity} qubit index(es), got {len(values)} in {text!r}")
    try:
        return gate_type(*values)
    except ValueError as exc:
        raise ParseError(f"Invalid gate {text!r}: {exc}") from exc


def circuit_to_text(circuit):
    """One gate per line, terminated by a newline (empty string for an empty circuit)."""
    return ''.join(f"{gate}\n" for gate in circuit)


def circuit_from_text(text):
    """Inverse of :func:`circuit_to_text`; blank lines and ``#`` comments are skipped."""
    circuit = Circuit()
    for line_number, line in enumerate(text.splitlines(), start=1):
        line = line.split('#', 1)[0].strip()
        if not line:
            continue
        try:
            circuit.append(toGate(line))
        except ParseError as exc:
            raise ParseError(f"line {line_number}: {exc}") from exc
    return circuit
