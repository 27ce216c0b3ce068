"""
Polynomials over GF(2^8)
Random polynomial construction, Horner evaluation and Lagrange interpolation.

A polynomial is a list of coefficients, lowest degree first, so
coefficients[0] is the intercept. The field only holds a single byte,
so every byte of a secret gets its own polynomial.
"""

from shamir256.entropy import rand_byte
from shamir256.field import add, div, mult


def make_polynomial(intercept: int, degree: int, rng=None) -> list[int]:
    """
    Build a random polynomial of the given degree with a fixed intercept.

    Args:
        intercept: The constant term, f(0).
        degree: Polynomial degree (threshold - 1).
        rng: Optional random.Random instance for deterministic tests.

    Returns:
        degree + 1 coefficients; all but the intercept are uniform random bytes.
    """
    coefficients = [intercept]
    for _ in range(degree):
        coefficients.append(rand_byte(rng))
    return coefficients


def evaluate_polynomial(coefficients: list[int], x: int) -> int:
    """Evaluate the polynomial at x using Horner's method."""
    # The origin is the intercept itself
    if x == 0:
        return coefficients[0]

    degree = len(coefficients) - 1
    result = coefficients[degree]
    for i in range(degree - 1, -1, -1):
        result = add(mult(result, x), coefficients[i])
    return result


def interpolate_polynomial(x_samples: list[int], y_samples: list[int], x: int) -> int:
    """
    Evaluate, at x, the polynomial passing through the sample points.

    Uses the Lagrange basis form:
        L(x) = sum_i y_i * prod_{j != i} (x - x_j) / (x_i - x_j)
    Subtraction is XOR in GF(2^8).

    Raises:
        FieldDivisionByZero: If two x samples are equal.
    """
    limit = len(x_samples)
    result = 0
    for i in range(limit):
        basis = 1
        for j in range(limit):
            if i == j:
                continue
            num = add(x, x_samples[j])
            denom = add(x_samples[i], x_samples[j])
            basis = mult(basis, div(num, denom))
        result = add(result, mult(y_samples[i], basis))
    return result
