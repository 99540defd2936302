# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


from typing import Protocol, Any, SupportsIndex, Iterator, Literal, Sequence, Union

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = npt.NDArray[np.float64]
ARRAY_LIKE = npt.ArrayLike
SCALAR_OR_ARRAY = Union[float, npt.ArrayLike]


class BasicSequenceProtocol(Protocol):

    def __getitem__(self, key: SupportsIndex, /) -> Any: ...

    def __iter__(self) -> Iterator[Any]: ...

    def __len__(self) -> int: ...


VECTOR_LIKE = Union[BasicSequenceProtocol, Sequence[float], DOUBLE_ARRAY]
"""
Anything that can be indexed like a fixed size vector: a glmath value, a list, a tuple, or a numpy array
"""

EULER_ORDERS = Literal['xyz', 'xzy', 'yxz', 'yzx', 'zxy', 'zyx']
