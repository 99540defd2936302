# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
glmath provides fixed size vector, matrix, quaternion, and dual quaternion types for 3D graphics and geometry math.

Every type wraps a float64 numpy array, stores matrices column-major, and is mutated in place by its methods (which
return the receiver so calls can be chained).  Use ``clone()`` to keep an original value.
"""

from glmath.common import EPSILON, RANDOM, DEGREE_TO_RAD, equals_approximately, sqrt, inverse_sqrt
from glmath.fixed_array import FixedArray

# the matrices must be imported before the rotations
from glmath.vectors import Vec2, Vec3, Vec4
from glmath.matrices import Mat2, Mat23, Mat3, Mat4
from glmath.rotations import Quat, DualQuat


__all__ = ['EPSILON', 'RANDOM', 'DEGREE_TO_RAD', 'equals_approximately', 'sqrt', 'inverse_sqrt', 'FixedArray',
           'Vec2', 'Vec3', 'Vec4', 'Mat2', 'Mat23', 'Mat3', 'Mat4', 'Quat', 'DualQuat']
