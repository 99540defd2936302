# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


import glmath.rotations.quaternion
import glmath.rotations.dual_quaternion

from glmath.rotations.quaternion import Quat, quaternion_multiplication, quaternion_conjugate
from glmath.rotations.dual_quaternion import DualQuat

__all__ = ['Quat', 'DualQuat', 'quaternion_multiplication', 'quaternion_conjugate']


r"""
This package defines the rotation types of glmath.

There are two rotation representations provided by this package and their format is described as follows:

.. _rotation-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
quaternion         A 4 element quaternion of the form
                   :math:`\mathbf{q}=\left[\begin{array}{c} q_x \\ q_y \\ q_z \\ q_s\end{array}\right]=
                   \left[\begin{array}{c}\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
                   \text{cos}(\frac{\theta}{2})\end{array}\right]`
                   where :math:`\hat{\mathbf{x}}` is a 3 element unit vector representing the axis of rotation and
                   :math:`\theta` is the total angle to rotate about that vector.  Note that quaternions are not unique
                   in that the rotation represented by :math:`\mathbf{q}` is the same rotation represented by
                   :math:`-\mathbf{q}`.
dual quaternion    An 8 element pair of quaternions :math:`(\mathbf{q}_r, \mathbf{q}_d)` representing a rotation by
                   :math:`\mathbf{q}_r` followed by a translation :math:`\mathbf{t}`, where
                   :math:`\mathbf{q}_d=\frac{1}{2}\mathbf{t}\otimes\mathbf{q}_r`.
=================  =====================================================================================================

The :class:`.Quat` object converts to and from rotation matrices (:class:`.Mat3`, :class:`.Mat4`), axis/angle pairs,
and Euler angles, composes rotations with the hamiltonian product, and interpolates between rotations
(:meth:`.Quat.slerp`, :meth:`.Quat.sqlerp`).  The :class:`.DualQuat` object composes rigid motions and converts to and
from :class:`.Mat4` transforms.
"""
