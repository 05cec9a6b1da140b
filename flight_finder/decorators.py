"""Decorators for performance monitoring and argument checks.

@timed
------
Measures and logs function execution time. Automatically warns if a function
takes longer than 5 seconds, helping identify slow runs on large event files.

Example:
    >>> @timed
    ... def load_events(path):
    ...     ...
    >>> load_events('events.txt')
    DEBUG: load_events took 2.34s

@validate_not_none
------------------
Validates that specified parameters are not None before function execution.
Raises ValueError with descriptive message if validation fails.

Example:
    >>> @validate_not_none('airport_index')
    ... def find_flights(all_aircraft, airport_index):
    ...     ...
    >>> find_flights({}, None)  # Raises ValueError
    ValueError: Parameter 'airport_index' cannot be None in find_flights()

Note: When stacking decorators, @timed should be outermost so it measures
the total time, and @validate_not_none innermost to fail fast.
"""

import time
import functools
import inspect
from typing import Callable, Any, TypeVar
from .logger import logger

__all__ = [
    "timed",
    "validate_not_none",
]

F = TypeVar("F", bound=Callable[..., Any])

SLOW_CALL_SECONDS = 5.0


def timed(func: F) -> F:
    """Decorator to measure and log function execution time.

    Args:
        func: Function to time

    Returns:
        Wrapped function that logs execution time
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        result = func(*args, **kwargs)
        elapsed = time.perf_counter() - start_time

        logger.debug(f"{func.__name__} took {elapsed:.2f}s")

        if elapsed > SLOW_CALL_SECONDS:
            logger.warning(
                f"{func.__name__} took {elapsed:.2f}s (consider --workers)"
            )

        return result

    return wrapper


def validate_not_none(*param_names: str) -> Callable[[F], F]:
    """Decorator to validate that specified parameters are not None.

    Args:
        *param_names: Names of parameters to validate

    Returns:
        Decorator function
    """

    def decorator(func: F) -> F:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            bound_args = sig.bind(*args, **kwargs)
            bound_args.apply_defaults()

            for param_name in param_names:
                if param_name in bound_args.arguments:
                    if bound_args.arguments[param_name] is None:
                        raise ValueError(
                            f"Parameter '{param_name}' cannot be None in "
                            f"{func.__name__}()"
                        )

            return func(*args, **kwargs)

        return wrapper

    return decorator
