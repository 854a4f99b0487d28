from typing import Union, Protocol, runtime_checkable, Any, SupportsIndex

import numpy as np
import numpy.typing as npt

DOUBLE_ARRAY = npt.NDArray[np.float64]
ARRAY_LIKE = npt.ArrayLike


@runtime_checkable
class MutableComponents(Protocol):
    """
    Anything a conversion can write its result into (a list or a numpy array).
    """

    def __setitem__(self, key: SupportsIndex, value: Any, /) -> None: ...

    def __len__(self) -> int: ...


OUT = Union[MutableComponents, DOUBLE_ARRAY, None]
