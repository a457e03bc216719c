import math

import numpy as np
from functools import wraps
import time
import logging
from typing import Union, Callable, TypeVar, Sequence

T = TypeVar('T')


class ConfigurationError(ValueError):
    def __init__(self, field: str, value, expectation: str) -> None:
        self.field = field
        self.value = value
        error_message = f"Invalid {field} ({value!r}): {expectation}."
        super().__init__(error_message)


class InvariantViolation(RuntimeError):
    def __init__(self, what: str, detail: str) -> None:
        error_message = f"Invariant violated on {what}: {detail}"
        super().__init__(error_message)


def make_rng(seed: Union[int, np.random.Generator, None]=None) -> np.random.Generator:
    """
    Build the random source of a run. A Generator passed in is returned as is, so callers
    can share one stream.
    """
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def first_argmax(values: Sequence[float]) -> int:
    # Ties go to the lowest index
    return int(np.argmax(np.asarray(values, dtype=float)))


def first_argmin(values: Sequence[float]) -> int:
    return int(np.argmin(np.asarray(values, dtype=float)))


def is_real_number(value) -> bool:
    return isinstance(value, (int, float, np.integer, np.floating)) and not isinstance(value, (bool, np.bool_))


def check_probability(field: str, value) -> float:
    '''
    Verify that a value can be used as a probability.

    :param field: Name reported in the error
    :param value: Value to check
    :return: The value as a float
    '''
    if not is_real_number(value):
        raise ConfigurationError(field, value, "expected a real number")
    value = float(value)
    # NaN fails both comparisons
    if not 0 <= value <= 1:
        raise ConfigurationError(field, value, "should be between [0, 1]")
    return value


def func_timer(func: Callable[..., T]) -> Callable[..., T]:
    @wraps(func)
    def func_timer_wrapper(*args, **kwargs) -> T:
        start_time = time.perf_counter()
        result = func(*args, **kwargs)
        end_time = time.perf_counter()
        total_time = end_time - start_time
        logging.info(f'Function {func.__name__} took {total_time:.4f} seconds')
        return result

    return func_timer_wrapper


def check_int(field: str, value, minimum: int) -> int:
    """
    Verify that a value is a whole number >= minimum. Integral floats such as 10.0 are accepted.
    """
    if not is_real_number(value) or not math.isfinite(value) or int(value) != value:
        raise ConfigurationError(field, value, "expected a whole number")
    if value < minimum:
        raise ConfigurationError(field, value, f"should be >= {minimum}")
    return int(value)
