import os
import sys
import unittest

import numpy as np

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

from circuit import Circuit
from codec import toPauli
from core import PauliOperator, left_pad
from tableau import FIGURE5_ROWS, Tableau, gen_circuit, sample_circuits


def basis(letter, k, n):
    return toPauli("+" + "I" * k + letter + "I" * (n - k - 1))


class TestFigureFiveExample(unittest.TestCase):
    def test_terminates_with_gates(self):
        tableau = Tableau.from_strings(FIGURE5_ROWS)
        circuit = tableau.run()
        self.assertTrue(tableau.done)
        self.assertGreater(len(circuit), 0)
        self.assertEqual(len(tableau.rounds), 4)
        self.assertLessEqual(circuit.num_qubits, 4)

    def test_rows_end_canonical(self):
        tableau = Tableau.from_strings(FIGURE5_ROWS)
        tableau.run()
        for k in range(4):
            a, b = tableau.rows[2 * k], tableau.rows[2 * k + 1]
            self.assertEqual(a, basis("X", 0, 4 - k))
            self.assertEqual(b, basis("Z", 0, 4 - k))

    def test_rounds_map_rows_to_basis(self):
        original = [toPauli(s) for s in FIGURE5_ROWS]
        tableau = Tableau.from_strings(FIGURE5_ROWS)
        tableau.run()
        for k in range(4):
            for offset, letter in enumerate("XZ"):
                row = left_pad(original[2 * k + offset], 4)
                tableau.round_circuit(k).apply(row)
                self.assertEqual(row, basis(letter, k, 4))

    def test_keep_signs(self):
        tableau = Tableau.from_strings(FIGURE5_ROWS)
        tableau.run(fix_signs=False)
        for k in range(4):
            self.assertEqual(tableau.rows[2 * k].pattern(), "X" + "I" * (3 - k))
            self.assertEqual(tableau.rows[2 * k + 1].pattern(), "Z" + "I" * (3 - k))


class TestTableauValidation(unittest.TestCase):
    def test_odd_row_count(self):
        with self.assertRaises(ValueError):
            Tableau.from_strings(["+XX", "+ZZ", "+X"])

    def test_wrong_pair_length(self):
        with self.assertRaises(ValueError):
            Tableau.from_strings(["+XX", "+ZI", "+XX", "+ZI"])

    def test_commuting_pair(self):
        with self.assertRaises(ValueError):
            Tableau.from_strings(["+XX", "+ZZ"])

    def test_too_many_rows(self):
        with self.assertRaises(ValueError):
            Tableau.from_strings(["+X", "+Z", "+X", "+Z"])

    def test_empty(self):
        with self.assertRaises(ValueError):
            Tableau([])

    def test_same_object_twice(self):
        op = toPauli("+XZ")
        with self.assertRaises(ValueError):
            Tableau([op, op])

    def test_partial_tableau(self):
        tableau = Tableau.from_strings(["+XYZ", "+ZII"])
        circuit = tableau.run()
        self.assertEqual(len(tableau.rounds), 1)
        self.assertEqual(tableau.rows[0], toPauli("+XII"))
        self.assertEqual(tableau.rows[1], toPauli("+ZII"))
        self.assertIsInstance(circuit, Circuit)

    def test_step_past_the_end_is_fatal(self):
        tableau = Tableau.from_strings(["+X", "+Z"])
        tableau.step()
        with self.assertRaises(AssertionError):
            tableau.step()


class TestRandomTableau(unittest.TestCase):
    def test_shapes(self):
        tableau = Tableau.random(5, seed=3)
        self.assertEqual([len(row) for row in tableau.rows], [5, 5, 4, 4, 3, 3, 2, 2, 1, 1])

    def test_needs_qubits(self):
        with self.assertRaises(ValueError):
            Tableau.random(0)
        with self.assertRaises(ValueError):
            gen_circuit(0)

    def test_composed_circuit_maps_rows_to_basis(self):
        rng = np.random.default_rng(8)
        for n in range(1, 8):
            tableau = Tableau.random(n, seed=rng)
            original = [row.copy() for row in tableau.rows]
            tableau.run()
            for k in range(n):
                for offset, letter in enumerate("XZ"):
                    with self.subTest(n=n, k=k, letter=letter):
                        row = left_pad(original[2 * k + offset], n)
                        tableau.round_circuit(k).apply(row)
                        self.assertEqual(row, basis(letter, k, n))

    def test_step_returns_shifted_round(self):
        tableau = Tableau.random(4, seed=21)
        tableau.step()
        second = tableau.step()
        for gate in second:
            self.assertGreaterEqual(min(gate.qubits), 1)
        self.assertEqual(list(tableau.circuit[tableau.rounds[1]:]), list(second))

    def test_gen_circuit_is_reproducible(self):
        self.assertEqual(gen_circuit(6, seed=5), gen_circuit(6, seed=5))
        self.assertLessEqual(gen_circuit(6, seed=5).num_qubits, 6)

    def test_sample_circuits(self):
        circuits = sample_circuits(3, 4, seed=10)
        self.assertEqual(len(circuits), 4)
        self.assertEqual(circuits, sample_circuits(3, 4, seed=10))
        joblib_circuits = sample_circuits(3, 4, seed=10, parallel=True, n_jobs=1)
        self.assertEqual(circuits, joblib_circuits)
        self.assertEqual(sample_circuits(3, 0, seed=10), [])
        with self.assertRaises(ValueError):
            sample_circuits(3, -1)


if __name__ == "__main__":
    unittest.main()
