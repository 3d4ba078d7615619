#!filepath: textreg/utils/retry.py
from functools import wraps
from typing import Callable, Tuple, Type

from textreg.utils.errors import ConvergenceError
from textreg.utils.logger import logs


class Retry:
    """
    Relaxed-tolerance retry.

    Each failed attempt multiplies the keyword argument ``relax_kw``
    (the solver tolerance by default) by ``relax_factor`` before retrying.
    No sleeping: a numerical fit gains nothing from waiting.
    """

    @staticmethod
    def run(
        func: Callable,
        *args,
        exceptions: Tuple[Type[Exception], ...] = (ConvergenceError,),
        max_attempts: int = 2,
        relax_kw: str = "tol",
        relax_factor: float = 10.0,
        **kwargs,
    ):
        """
        手动调用版本的重试机制
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")

        name = getattr(func, "__name__", repr(func))
        attempt = 1
        while attempt <= max_attempts:

            try:
                return func(*args, **kwargs)

            except exceptions as e:
                if attempt == max_attempts:
                    logs.warning(
                        f"[Retry] {name} failed after {max_attempts} attempts: {e}"
                    )
                    raise

                if relax_kw in kwargs and kwargs[relax_kw] is not None:
                    kwargs[relax_kw] = kwargs[relax_kw] * relax_factor

                logs.warning(
                    f"[Retry] attempt {attempt}/{max_attempts} failed: {e}. "
                    f"retry with {relax_kw}={kwargs.get(relax_kw)}"
                )
                attempt += 1

    @staticmethod
    def decorator(
        exceptions: Tuple[Type[Exception], ...] = (ConvergenceError,),
        max_attempts: int = 2,
        relax_kw: str = "tol",
        relax_factor: float = 10.0,
    ):
        """
        装饰器版本
        """

        def wrapper(func: Callable):
            @wraps(func)
            def inner(*args, **kwargs):
                return Retry.run(
                    func,
                    *args,
                    exceptions=exceptions,
                    max_attempts=max_attempts,
                    relax_kw=relax_kw,
                    relax_factor=relax_factor,
                    **kwargs,
                )

            return inner

        return wrapper
