"""Natural cubic spline through curve key points.

Follows "Finding curves using Cubic Splines" notes by Steven Rauch and John
Stockie: the second derivatives at each knot are the solution of a
tridiagonal linear system whose first and last rows pin them to zero.
"""

import logging

import numpy as np

from curvelut.errors import OutOfMemory

logger = logging.getLogger(__name__)

# Column layout of the banded matrix.
BD = 0  # sub diagonal (below main)
MD = 1  # main diagonal (center)
AD = 2  # super diagonal (above main)


def solve_tridiagonal(matrix: np.ndarray, r: np.ndarray) -> np.ndarray:
    """Solve a tridiagonal system in place with the Thomas algorithm.

    Args:
        matrix: ``(n, 3)`` array holding the sub, main and super diagonals.
        r: Right-hand side of length ``n``; overwritten with the solution.

    Returns:
        The solution vector ``r``.

    A pivot of exactly zero is replaced by an elimination factor of 1 instead
    of failing.
    """
    n = len(r)
    for i in range(1, n):
        den = matrix[i, MD] - matrix[i, BD] * matrix[i - 1, AD]
        k = 1.0 / den if den else 1.0
        matrix[i, AD] *= k
        r[i] = (r[i] - matrix[i, BD] * r[i - 1]) * k
    for i in range(n - 2, -1, -1):
        r[i] = r[i] - matrix[i, AD] * r[i + 1]
    return r


def second_derivatives(xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
    """Compute the natural spline second derivatives at every knot."""
    n = len(xs)
    try:
        matrix = np.zeros((n, 3), dtype=np.float64)
        r = np.zeros(n, dtype=np.float64)
    except MemoryError as e:
        raise OutOfMemory("malloc failure (matrix/h/r)") from e
    h = np.diff(xs)

    # right-side of the polynomials, modified in place to contain the solution
    for i in range(1, n - 1):
        r[i] = 6 * ((ys[i + 1] - ys[i]) / h[i] - (ys[i] - ys[i - 1]) / h[i - 1])

    # left side of the polynomials
    matrix[0, MD] = matrix[n - 1, MD] = 1
    for i in range(1, n - 1):
        matrix[i, BD] = h[i - 1]
        matrix[i, MD] = 2 * (h[i - 1] + h[i])
        matrix[i, AD] = h[i]

    return solve_tridiagonal(matrix, r)


def segment_coefficients(
    xs: np.ndarray, ys: np.ndarray, m: np.ndarray
) -> list[tuple[float, float, float, float]]:
    """Return ``(a, b, c, d)`` of the cubic on every segment.

    The polynomial of segment ``i`` is ``a + b*t + c*t**2 + d*t**3`` with ``t``
    measured from ``xs[i]``.
    """
    coefficients = []
    for i in range(len(xs) - 1):
        h = xs[i + 1] - xs[i]
        a = ys[i]
        b = (ys[i + 1] - ys[i]) / h - h * m[i] / 2.0 - h * (m[i + 1] - m[i]) / 6.0
        c = m[i] / 2.0
        d = (m[i + 1] - m[i]) / (6.0 * h)
        coefficients.append((float(a), float(b), float(c), float(d)))
    return coefficients
