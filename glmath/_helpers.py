# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


import numpy as np

from glmath._typing import ARRAY_LIKE, DOUBLE_ARRAY


def _check_array_and_shape(input: ARRAY_LIKE, length: int) -> DOUBLE_ARRAY:
    """
    Checks that ``input`` is a flat array like with exactly ``length`` elements and returns it as a new float64 array.

    :param input: the array like to check
    :param length: the number of elements required
    :return: a copy of the input as a float64 numpy array
    :raises ValueError: if the input is not shaped or does not have the required number of elements
    """
    in_shape = np.shape(input)

    if not in_shape:
        raise ValueError('The input must be shaped')

    if in_shape != (length,):
        raise ValueError(f'The input must be a flat sequence of length {length}, not shape {in_shape}')

    # ensure the value is an array and break mutability
    return np.array(input, dtype=np.float64)


def _check_vector2(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(vector, 2)


def _check_vector3(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(vector, 3)


def _check_quaternion(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(quaternion, 4)
