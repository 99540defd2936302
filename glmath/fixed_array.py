# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This module provides the :class:`FixedArray` class, the base of every vector, matrix, and quaternion type in glmath.

Description
-----------

Each glmath type is a thin wrapper around a flat numpy array with a fixed number of float64 components.  The wrapper
supplies indexing, iteration, conversion to numpy, equality, printing, and copying, so that the subclasses only need
to implement their math.

Every mutating method on a glmath type changes the receiver in place and returns it so that calls can be chained.  Use
:meth:`FixedArray.clone` first when the original value must be kept.
"""

import copy

from typing import Any, Iterator, Self

import numpy as np

from glmath._typing import ARRAY_LIKE, DOUBLE_ARRAY
from glmath._helpers import _check_array_and_shape
from glmath.common import equals_approximately


__all__ = ['FixedArray', 'component']


def component(index: int, doc: str) -> property:
    """
    Builds a read/write property exposing a single component of a :class:`FixedArray`.

    :param index: the flat index of the component
    :param doc: the docstring for the property
    :return: the property
    """

    def getter(self: 'FixedArray') -> np.float64:
        return self._data[index]

    def setter(self: 'FixedArray', value: float):
        self._data[index] = value

    return property(getter, setter, doc=doc)


class FixedArray:
    """
    A fixed length array of float64 components.

    A :class:`FixedArray` can be constructed with no arguments (giving :attr:`default`), with one positional argument
    per component, or with a single array like containing every component:

        >>> from glmath import Vec3
        >>> Vec3()
        Vec3(0.0, 0.0, 0.0)
        >>> Vec3(1, 2, 3)
        Vec3(1.0, 2.0, 3.0)
        >>> Vec3([1, 2, 3])
        Vec3(1.0, 2.0, 3.0)

    Any other number of components raises a ``ValueError``.
    """

    size: int = 0
    """
    The number of components stored by this type.
    """

    default: tuple[float, ...] = ()
    """
    The components used when no values are provided to the constructor.
    """

    label: str = ''
    """
    The prefix used when converting to a string.
    """

    def __init__(self, *values: float | ARRAY_LIKE):

        if not values:
            self._data: DOUBLE_ARRAY = np.array(self.default, dtype=np.float64)
        elif len(values) == 1 and np.ndim(values[0]) > 0:
            self._data = _check_array_and_shape(values[0], self.size)
        elif len(values) == self.size:
            self._data = np.array(values, dtype=np.float64)
        else:
            raise ValueError(f'{type(self).__name__} requires {self.size} components but {len(values)} were given')

    def __getitem__(self, key: int | slice) -> Any:
        value = self._data[key]
        if isinstance(value, np.ndarray):
            return value.copy()
        return value

    def __setitem__(self, key: int | slice, value: float | ARRAY_LIKE):
        self._data[key] = value

    def __iter__(self) -> Iterator[np.float64]:
        # iterate over a copy so that unpacking yields numpy scalars that are not views
        return iter(self._data.copy())

    def __len__(self) -> int:
        return self.size

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.array(self._data, dtype=dtype)

    def __eq__(self, other: Any) -> bool:

        # check that other is a flat sequence of the right length, if not they can't be equal
        try:
            other_array = _check_array_and_shape(other, self.size)
        except (ValueError, TypeError):
            return False

        return bool(np.array_equal(self._data, other_array))

    __hash__ = None

    def __repr__(self) -> str:
        return f'{type(self).__name__}({", ".join(repr(v) for v in self._data.tolist())})'

    def __str__(self) -> str:
        return f'{self.label}({", ".join(str(v) for v in self._data.tolist())})'

    def clone(self) -> Self:
        """
        Returns a deep copy of self.

        :return: A deep copy of self breaking all mutability
        """

        return copy.deepcopy(self)

    def set(self, values: ARRAY_LIKE) -> Self:
        """
        Copies the components of ``values`` into self.

        :param values: a glmath value or array like with the same number of components as self
        :return: self
        :raises ValueError: if values does not have the right number of components
        """

        self._data[:] = _check_array_and_shape(values, self.size)
        return self

    def equals_exact(self, b: ARRAY_LIKE) -> bool:
        """
        Returns whether every component of ``b`` is exactly equal to the corresponding component of self.
        """
        return bool(np.array_equal(self._data, _check_array_and_shape(b, self.size)))

    def equals_approximately(self, b: ARRAY_LIKE) -> bool:
        """
        Returns whether every component of ``b`` is equal to the corresponding component of self to within
        :data:`.EPSILON` (see :func:`.equals_approximately`).
        """
        return equals_approximately(self._data, _check_array_and_shape(b, self.size))
