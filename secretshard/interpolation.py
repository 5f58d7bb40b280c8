"""
Lagrange Interpolation
Recover a polynomial's value from points on it, in GF(2^8).

Used by the combining engine to read f(0), the secret byte, back out of
threshold shares. Subtraction is XOR in this field, so (x - x_k) and
(x_j - x_k) are both additions.

The basis weights depend only on the x-coordinates, so a caller holding many
y-vectors over the same x-coordinates computes them once with
lagrange_weights() and reuses them for every byte position.
"""

from typing import Iterable, Sequence

from secretshard import gf256
from secretshard.errors import DomainError


def lagrange_weights(xs: Sequence[int], x: int = 0) -> list[int]:
    """
    The Lagrange basis polynomials l_j evaluated at x.

    f(x) is then the field sum of mul(y_j, weights[j]).

    Raises:
        DomainError: If xs is empty or has a repeated x-coordinate.
    """
    xs = list(xs)
    if not xs:
        raise DomainError("Cannot interpolate without any points")
    if len(set(xs)) != len(xs):
        raise DomainError("Interpolation points must have distinct x-coordinates")

    weights = []
    for j, xj in enumerate(xs):
        basis = 1
        for k, xk in enumerate(xs):
            if k == j:
                continue
            basis = gf256.mul(basis, gf256.div(gf256.sub(x, xk), gf256.sub(xj, xk)))
        weights.append(basis)
    return weights


def interpolate(points: Iterable[tuple[int, int]], x: int) -> int:
    """
    Evaluate, at x, the unique lowest-degree polynomial through points.

    Args:
        points: (x_j, y_j) pairs with pairwise-distinct x_j.
        x: Where to evaluate.

    Returns:
        f(x) as a field element.

    Raises:
        DomainError: If points is empty or two points share an x-coordinate.
    """
    points = list(points)
    weights = lagrange_weights([xj for xj, _ in points], x)

    result = 0
    for (_, yj), weight in zip(points, weights):
        result = gf256.add(result, gf256.mul(yj, weight))
    return result


def interpolate_at_zero(points: Iterable[tuple[int, int]]) -> int:
    """
    Recover f(0) from points on f.

    With fewer points than the polynomial's degree + 1 this still returns a
    value, but that value is unrelated to f(0). Counting shares against the
    threshold is the caller's job.
    """
    return interpolate(points, 0)
