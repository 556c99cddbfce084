import itertools
import unittest

from tbls import CURVE, DuplicateIdentity, InvalidInput, R
from tbls.constants import P
from tbls.sharing import (
    evaluate_commitments,
    evaluate_polynomial,
    interpolate_in_exponent,
    lagrange_coefficients,
)


def recombine(points, order):
    weights = lagrange_coefficients([x for x, _ in points], order)
    return sum(w * y for w, (_, y) in zip(weights, points)) % order


class Tests(unittest.TestCase):
    def setUp(self):
        self.coefficients = (
            0x1A2B3C4D5E6F,
            R - 12345,
            0xDEADBEEF * 2**200 % R,
        )

    def test_horner_matches_naive_evaluation(self):
        for x in (0, 1, 2, 7, 2**64 + 3, R - 1):
            expected = sum(
                a * pow(x, i, R) for i, a in enumerate(self.coefficients)
            ) % R
            self.assertEqual(evaluate_polynomial(self.coefficients, x, R), expected)

    def test_evaluate_at_zero_is_constant_term(self):
        self.assertEqual(
            evaluate_polynomial(self.coefficients, 0, R), self.coefficients[0]
        )

    def test_single_coefficient(self):
        for x in (0, 1, 5, R - 1):
            self.assertEqual(evaluate_polynomial((42,), x, R), 42)

    def test_empty_coefficients(self):
        with self.assertRaises(InvalidInput):
            evaluate_polynomial((), 1, R)
        with self.assertRaises(InvalidInput):
            evaluate_commitments((), 1, CURVE)

    def test_field_modulus_gives_a_different_share(self):
        x = R - 1
        right = evaluate_polynomial(self.coefficients, x, R)
        wrong = evaluate_polynomial(self.coefficients, x, P) % R
        self.assertNotEqual(right, wrong)

    def test_commitments_match_scalar_evaluation(self):
        g = CURVE.g1_generator()
        commitments = [CURVE.scalar_mul(g, a) for a in self.coefficients]
        for x in (1, 2, 3, 1000):
            share = evaluate_polynomial(self.coefficients, x, R)
            self.assertTrue(
                CURVE.eq(
                    evaluate_commitments(commitments, x, CURVE),
                    CURVE.scalar_mul(g, share),
                )
            )

    def test_lagrange_coefficients_sum_to_one(self):
        # Interpolating the constant polynomial 1 must give 1
        weights = lagrange_coefficients((1, 2, 3, 4), R)
        self.assertEqual(sum(weights) % R, 1)

    def test_lagrange_singleton(self):
        self.assertEqual(lagrange_coefficients((9,), R), (1,))

    def test_lagrange_duplicate(self):
        with self.assertRaises(DuplicateIdentity):
            lagrange_coefficients((1, 2, 1), R)
        with self.assertRaises(DuplicateIdentity):
            lagrange_coefficients((3, 3), R)

    def test_duplicate_identity_is_invalid_input(self):
        with self.assertRaises(InvalidInput):
            lagrange_coefficients((5, 5), R)

    def test_lagrange_empty(self):
        with self.assertRaises(InvalidInput):
            lagrange_coefficients((), R)

    def test_recombine_scalars_every_subset(self):
        xs = range(1, 6)
        points = [(x, evaluate_polynomial(self.coefficients, x, R)) for x in xs]
        for subset in itertools.combinations(points, 3):
            self.assertEqual(recombine(subset, R), self.coefficients[0])
        # Using more points than the threshold still recovers the secret
        self.assertEqual(recombine(points, R), self.coefficients[0])

    def test_too_few_points_do_not_recover(self):
        points = [(x, evaluate_polynomial(self.coefficients, x, R)) for x in (1, 2)]
        self.assertNotEqual(recombine(points, R), self.coefficients[0])

    def test_interpolate_in_exponent(self):
        g = CURVE.g1_generator()
        points = [
            (x, CURVE.scalar_mul(g, evaluate_polynomial(self.coefficients, x, R)))
            for x in (2, 4, 5)
        ]
        self.assertTrue(
            CURVE.eq(
                interpolate_in_exponent(points, CURVE),
                CURVE.scalar_mul(g, self.coefficients[0]),
            )
        )

    def test_interpolate_in_exponent_singleton(self):
        point = CURVE.scalar_mul(CURVE.g1_generator(), 77)
        self.assertTrue(CURVE.eq(interpolate_in_exponent([(3, point)], CURVE), point))


if __name__ == "__main__":
    unittest.main()
