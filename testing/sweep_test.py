import os
import sys
import unittest

import numpy as np

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

from circuit import Circuit, CNot, Hadamard, Phase, Swap
from codec import toPauli
from core import commutes, gen_anticommuting_pair
from sweep import sweep


def canonical(letter, n):
    return letter + "I" * (n - 1)


class TestSweepExamples(unittest.TestCase):
    def test_reference_pair(self):
        a, b = toPauli("+XYYX"), toPauli("+YYYX")
        circuit = sweep(a, b)
        self.assertGreater(len(circuit), 0)
        self.assertEqual(a.pattern(), "XIII")
        self.assertEqual(b.pattern(), "ZIII")

    def test_circuit_replays_on_copies(self):
        a, b = toPauli("+XYYX"), toPauli("+YYYX")
        a0, b0 = a.copy(), b.copy()
        circuit = sweep(a, b)
        circuit.apply(a0, b0)
        self.assertEqual(a0, a)
        self.assertEqual(b0, b)

    def test_already_canonical_emits_nothing(self):
        a, b = toPauli("-XII"), toPauli("+ZII")
        self.assertEqual(sweep(a, b), Circuit())
        self.assertEqual(a, toPauli("-XII"))

    def test_swap_to_front(self):
        a, b = toPauli("+IX"), toPauli("+IZ")
        circuit = sweep(a, b)
        self.assertEqual(list(circuit), [Swap(0, 1)])
        self.assertEqual(a, toPauli("+XI"))
        self.assertEqual(b, toPauli("+ZI"))

    def test_single_qubit_z_x(self):
        a, b = toPauli("+Z"), toPauli("+X")
        self.assertEqual(list(sweep(a, b)), [Hadamard(0)])
        self.assertEqual(a, toPauli("+X"))
        self.assertEqual(b, toPauli("+Z"))

    def test_single_qubit_x_y(self):
        a, b = toPauli("+X"), toPauli("+Y")
        circuit = sweep(a, b)
        self.assertEqual(list(circuit), [Hadamard(0), Phase(0), Hadamard(0)])
        self.assertEqual(a, toPauli("+X"))
        self.assertEqual(b, toPauli("+Z"))

    def test_odd_weight_x_support(self):
        # Three X bits: the trailing index waits a round instead of being dropped.
        a, b = toPauli("+XXXI"), toPauli("+ZIII")
        circuit = sweep(a, b)
        self.assertEqual(list(circuit), [CNot(0, 1), CNot(0, 2)])
        self.assertEqual(a, toPauli("+XIII"))
        self.assertEqual(b, toPauli("+ZIII"))

    def test_odd_weight_five(self):
        a, b = toPauli("+IXXXXX"), toPauli("+IZIIII")
        circuit = sweep(a, b)
        self.assertEqual(
            list(circuit)[:4],
            [CNot(1, 2), CNot(3, 4), CNot(1, 3), CNot(1, 5)],
        )
        self.assertEqual(a.pattern(), canonical("X", 6))
        self.assertEqual(b.pattern(), canonical("Z", 6))

    def test_signs_are_tracked_not_forced(self):
        a, b = toPauli("-X"), toPauli("-Z")
        sweep(a, b)
        self.assertEqual(a, toPauli("-X"))
        self.assertEqual(b, toPauli("-Z"))


class TestSweepPreconditions(unittest.TestCase):
    def test_aliasing_is_fatal(self):
        a = toPauli("+X")
        with self.assertRaises(AssertionError):
            sweep(a, a)

    def test_length_mismatch_is_fatal(self):
        with self.assertRaises(AssertionError):
            sweep(toPauli("+XI"), toPauli("+Z"))

    def test_identity_is_fatal(self):
        with self.assertRaises(AssertionError):
            sweep(toPauli("+II"), toPauli("+ZI"))


class TestSweepRandom(unittest.TestCase):
    def test_canonical_form_for_random_pairs(self):
        rng = np.random.default_rng(1234)
        for n in range(1, 10):
            for _ in range(40):
                a, b = gen_anticommuting_pair(n, rng)
                circuit = sweep(a, b)
                with self.subTest(n=n):
                    self.assertEqual(a.pattern(), canonical("X", n))
                    self.assertEqual(b.pattern(), canonical("Z", n))
                    self.assertFalse(commutes(a, b))
                    self.assertLessEqual(circuit.num_qubits, n)

    def test_gate_count_is_bounded(self):
        rng = np.random.default_rng(99)
        n = 16
        for _ in range(20):
            a, b = gen_anticommuting_pair(n, rng)
            circuit = sweep(a, b)
            # Each stage touches every qubit at most a couple of times.
            self.assertLessEqual(len(circuit), 5 * n + 3)


if __name__ == "__main__":
    unittest.main()
