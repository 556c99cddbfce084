"""
Shamir secret sharing over the scalar field of a pairing-friendly curve.

The functions here are the algebra of the threshold scheme and know nothing
about keys or signatures:

- evaluate_polynomial: Horner evaluation of the master polynomial, modulo the
  group order.
- evaluate_commitments: the same evaluation carried out "in the exponent" on
  the public commitments to the coefficients.
- lagrange_coefficients / interpolate_in_exponent: recombination at x = 0 from points
  at distinct identities, on scalars or on group elements.

All of them take the modulus or the curve explicitly.
"""

import logging
from typing import Sequence, Tuple

from .curve import CurvePrimitives, Point
from .errors import DuplicateIdentity, InvalidInput

logger = logging.getLogger(__name__)


def evaluate_polynomial(coefficients: Sequence[int], x: int, order: int) -> int:
    """
    Evaluate the polynomial at x using Horner's method.

    Parameters:
    coefficients (Sequence[int]): a_0, ..., a_(k-1), constant term first.
    x (int): The point at which the polynomial is evaluated.
    order (int): The group order every step is reduced by.

    Returns:
    int: a_0 + a_1 * x + ... + a_(k-1) * x^(k-1) mod order.

    Raises:
    InvalidInput: If there are no coefficients.
    """
    if not coefficients:
        raise InvalidInput("At least one coefficient is required.")

    y = coefficients[-1] % order
    for coefficient in reversed(coefficients[:-1]):
        y = (y * x + coefficient) % order
    return y


def evaluate_commitments(
    commitments: Sequence[Point], x: int, curve: CurvePrimitives
) -> Point:
    """
    Evaluate the committed polynomial at x in the exponent.

    With commitments P_i = a_i * G this returns f(x) * G without learning any
    a_i. The scalar multiplication must be the curve's order-reducing one.

    Raises:
    InvalidInput: If there are no commitments.
    """
    if not commitments:
        raise InvalidInput("At least one commitment is required.")

    y = commitments[-1]
    for commitment in reversed(commitments[:-1]):
        y = curve.add(curve.scalar_mul(y, x), commitment)
    return y


def lagrange_coefficients(xs: Sequence[int], order: int) -> Tuple[int, ...]:
    """
    Compute the Lagrange weights for interpolating at zero.

    lambda_i = prod(x_j / (x_j - x_i)), j != i, all modulo order.

    Raises:
    InvalidInput: If xs is empty.
    DuplicateIdentity: If two of the xs are equal modulo order.
    """
    if not xs:
        raise InvalidInput("At least one identity is required.")

    weights = []
    for i, x_i in enumerate(xs):
        numerator = 1
        denominator = 1
        for j, x_j in enumerate(xs):
            if j == i:
                continue
            numerator = numerator * x_j % order
            denominator = denominator * (x_j - x_i) % order
        if denominator == 0:
            raise DuplicateIdentity("Identities in a recovery set must be distinct.")
        weights.append(numerator * pow(denominator, order - 2, order) % order)
    return tuple(weights)


def interpolate_in_exponent(
    points: Sequence[Tuple[int, Point]], curve: CurvePrimitives
) -> Point:
    """
    Recover f(0) * Q from (x, f(x) * Q) pairs.

    Raises:
    InvalidInput: If points is empty.
    DuplicateIdentity: If two xs coincide.
    """
    weights = lagrange_coefficients([x for x, _ in points], curve.order)
    logger.debug("Interpolating in the exponent from %d points", len(points))

    result = None
    for weight, (_, y) in zip(weights, points):
        term = curve.scalar_mul(y, weight)
        result = term if result is None else curve.add(result, term)
    return result
