# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This module provides the scalar constants and helper functions shared by every type in glmath.

Description
-----------

All of the value types in glmath store their components as 64 bit floats and perform their arithmetic with numpy
scalars.  As a result, degenerate inputs (a zero length axis, a singular matrix, a zero quaternion) never raise
exceptions.  Instead they produce ``inf`` or ``nan`` (along with a numpy ``RuntimeWarning``) which the caller can
inspect.  The only places where degenerate input is intercepted are documented on the individual methods.

The tolerance used for approximate comparisons is :data:`EPSILON`, which is applied as a mixed absolute/relative
tolerance by :func:`equals_approximately`.
"""

import numpy as np

from glmath._typing import ARRAY_LIKE, SCALAR_OR_ARRAY


__all__ = ['EPSILON', 'RANDOM', 'DEGREE_TO_RAD', 'equals_approximately', 'sqrt', 'inverse_sqrt']


EPSILON: float = 1e-6
"""
The tolerance used for approximate equality and for the guard points of the library.
"""

RANDOM: np.random.Generator = np.random.default_rng()
"""
The random number generator used by the ``random`` methods when no ``rng`` is supplied.
"""

DEGREE_TO_RAD: float = np.pi / 180
"""
Multiply by this to convert degrees into radians.
"""


def equals_approximately(a: ARRAY_LIKE, b: ARRAY_LIKE, epsilon: float = EPSILON) -> bool:
    r"""
    Returns whether ``a`` and ``b`` are equal to within a mixed absolute/relative tolerance.

    The comparison is

    .. math::
        |a-b|\leq\epsilon\max(1, |a|, |b|)

    so that values near zero are compared absolutely while large values are compared relatively.  If arrays are
    provided then every element pair must pass.

    :param a: the first value(s)
    :param b: the second value(s)
    :param epsilon: the tolerance to use
    :return: ``True`` if the values are approximately equal
    """

    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)

    return bool(np.all(np.abs(a - b) <= epsilon * np.maximum(1.0, np.maximum(np.abs(a), np.abs(b)))))


def sqrt(n: SCALAR_OR_ARRAY) -> np.float64:
    """
    The square root of ``n``.  Negative input gives ``nan``.
    """
    return np.sqrt(np.float64(n))


def inverse_sqrt(n: SCALAR_OR_ARRAY) -> np.float64:
    """
    The reciprocal square root of ``n``.  Zero input gives ``inf``.
    """
    return 1.0 / np.sqrt(np.float64(n))
