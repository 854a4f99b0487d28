from typing import TypeVar

import numpy as np

from rotconv._typing import ARRAY_LIKE, DOUBLE_ARRAY, OUT
from rotconv.rotations.core.tolerances import ConversionTolerances, DEFAULT_TOLERANCES


ResultT = TypeVar('ResultT', bound=tuple)


def _check_array_and_shape(input: ARRAY_LIKE,
                           length: int,
                           name: str) -> DOUBLE_ARRAY:
    in_shape = np.shape(input)

    if not in_shape:
        raise ValueError(f'The {name} must be shaped')

    if in_shape not in ((length,), (length, 1)):
        raise ValueError(f'The {name} must have shape ({length},) or ({length}, 1), got shape {in_shape}')

    # ensure the value is an array and break mutability
    return np.array(input, dtype=np.float64).ravel()


def _check_quaternion_array_and_shape(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(quaternion, 4, 'quaternion')


def _check_axis_angle_array_and_shape(axis_angle: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(axis_angle, 4, 'axis-angle')


def _check_vector_array_and_shape(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    return _check_array_and_shape(vector, 3, 'vector')


def _check_matrix_array_and_shape(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    in_shape = np.shape(matrix)

    if in_shape not in ((3, 3), (9,)):
        raise ValueError(f'The matrix must be 3x3 or have 9 elements, got shape {in_shape}')

    # ensure the value is an array and break mutability
    return np.array(matrix, dtype=np.float64).ravel()


def _tolerances(tolerances: ConversionTolerances | None) -> ConversionTolerances:
    return DEFAULT_TOLERANCES if tolerances is None else tolerances


def _pack(result: ResultT, out: OUT) -> ResultT:
    """
    Copy the components of result into out (if given) and return result.

    A 3x3 numpy array is filled in row-major order.
    """

    if out is None:
        return result

    if isinstance(out, np.ndarray):
        if out.size != len(result):
            raise ValueError(f'out must have {len(result)} elements, got shape {out.shape}')
        out.flat[:] = result
        return result

    if len(out) != len(result):
        raise ValueError(f'out must have {len(result)} elements, got {len(out)}')

    for index, value in enumerate(result):
        out[index] = value

    return result


def _nan_like(result_type: type[ResultT]) -> ResultT:
    return result_type(*([np.nan] * len(result_type._fields)))
