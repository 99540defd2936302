# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This package provides the column-major matrix types of glmath: :class:`.Mat2`, :class:`.Mat23` (a compact 2D affine
transform), :class:`.Mat3`, and :class:`.Mat4`.
"""

from glmath.matrices.matrix import Matrix, SquareMatrix
from glmath.matrices.mat2 import Mat2
from glmath.matrices.mat23 import Mat23
# mat3 must be loaded before mat4 because the rotations package depends on it
from glmath.matrices.mat3 import Mat3, quaternion_to_columns
from glmath.matrices.mat4 import Mat4


__all__ = ['Matrix', 'SquareMatrix', 'Mat2', 'Mat23', 'Mat3', 'Mat4', 'quaternion_to_columns']
