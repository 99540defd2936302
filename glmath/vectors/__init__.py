# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This package provides the fixed length vector types used as inputs and outputs throughout glmath.
"""

from glmath.vectors.vector import Vector
from glmath.vectors.vec3 import Vec3
from glmath.vectors.vec2 import Vec2
from glmath.vectors.vec4 import Vec4


__all__ = ['Vector', 'Vec2', 'Vec3', 'Vec4']
