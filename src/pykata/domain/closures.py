"""Closure and decorator builders: composition, numeric builders, wrappers.

Every function here returns a new callable whose private state (if any)
lives in its own closure. Nothing is shared between two returned callables,
so two memoized functions never see each other's cache and two id
generators never advance each other's cursor.

Contents:
    * :func:`get_composition` - ``f(g(x))``
    * :func:`get_power_function` / :func:`get_polynom` - numeric builders
    * :func:`memoize` - single-slot cache per wrapper
    * :func:`retry` - bounded re-invocation on failure
    * :func:`logger` - starts/ends notifications around each call
    * :func:`partial_using_arguments` - pre-bound leading arguments
    * :func:`get_id_generator_function` - read-then-increment counter
"""

from __future__ import annotations

import functools
import itertools
import math
from collections.abc import Callable, Sequence
from numbers import Real
from typing import Any, TypeVar

import orjson

from .enums import OnExhausted

T = TypeVar("T")

_MISSING: Any = object()


def get_composition(f: Callable[[Any], T], g: Callable[[Any], Any]) -> Callable[[Any], T]:
    """Return the composition ``h(x) = f(g(x))``.

    Example:
        >>> h = get_composition(lambda x: x + 1, lambda x: x * 2)
        >>> h(3)
        7
    """

    def composition(x: Any) -> T:
        return f(g(x))

    return composition


def _is_odd_integer(value: float) -> bool:
    if isinstance(value, int):
        return value % 2 == 1
    return float(value).is_integer() and int(value) % 2 == 1


def _is_integral(value: float) -> bool:
    return isinstance(value, int) or float(value).is_integer()


def _out_of_range_pow(base: float, exponent: float) -> float:
    """Return ``pow`` for operands or results beyond the float range.

    Works on comparisons only, so integers too large for a float never get
    converted.

    Example:
        >>> _out_of_range_pow(10**400, 3), _out_of_range_pow(-(10**400), 3)
        (inf, -inf)
        >>> _out_of_range_pow(10**400, -1), _out_of_range_pow(10**400, 0)
        (0.0, 1.0)
    """
    if base < 0 and not _is_integral(exponent):
        return math.nan
    sign = -1.0 if base < 0 and _is_odd_integer(exponent) else 1.0
    if exponent == 0 or abs(base) == 1:
        return sign
    grows = (abs(base) > 1) == (exponent > 0)
    return sign * (math.inf if grows else 0.0)


def _float_pow(base: float, exponent: float) -> float:
    """Raise *base* to *exponent* with IEEE 754 results instead of exceptions.

    ``math.pow`` raises where IEEE ``pow`` returns a special value; map those
    cases back: domain errors become ``nan``, a zero base with a negative
    exponent becomes an infinity carrying the sign of the zero, and overflow
    (of the result or of an integer operand) goes through
    :func:`_out_of_range_pow`.

    Example:
        >>> _float_pow(2, 10)
        1024.0
        >>> _float_pow(-8, 0.5)
        nan
        >>> _float_pow(-0.0, -1)
        -inf
        >>> _float_pow(10**400, 2)
        inf
    """
    try:
        return math.pow(base, exponent)
    except ValueError:
        if base != 0:
            return math.nan
        return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
    except OverflowError:
        return _out_of_range_pow(base, exponent)


def get_power_function(exponent: float) -> Callable[[float], float]:
    """Return ``x -> x ** exponent`` evaluated with floating-point semantics.

    Negative bases with fractional exponents give ``nan`` rather than a
    complex number or an exception.

    Example:
        >>> power2 = get_power_function(2)
        >>> power2(4)
        16.0
        >>> get_power_function(0.5)(16)
        4.0
    """

    def power(base: float) -> float:
        return _float_pow(base, exponent)

    return power


def get_polynom(*coefficients: float) -> Callable[[float], float] | None:
    """Return the polynomial with *coefficients*, highest degree first.

    ``get_polynom(2, 3, 5)`` is ``y = 2*x^2 + 3*x + 5``. Terms are summed in
    descending degree, left to right.

    Returns:
        The polynomial as a unary callable, or ``None`` when no coefficients
        were given.

    Example:
        >>> get_polynom(2, 3, 5)(1)
        10.0
        >>> get_polynom(1, -3)(5)
        2.0
        >>> get_polynom() is None
        True
    """
    if not coefficients:
        return None
    degree = len(coefficients) - 1

    def polynom(x: float) -> float:
        result = 0.0
        for index, coefficient in enumerate(coefficients):
            result += coefficient * _float_pow(x, degree - index)
        return result

    return polynom


def memoize(func: Callable[[], T]) -> Callable[..., T]:
    """Call *func* once and replay its result on every later invocation.

    The wrapper ignores its own arguments. The cache slot belongs to this
    wrapper alone; memoizing the same function twice yields two caches.
    A first call that raises caches nothing.

    ``wrapper.cache_clear()`` empties the slot so the next call recomputes.

    Example:
        >>> calls = []
        >>> memo = memoize(lambda: calls.append(1) or len(calls))
        >>> memo(), memo(), memo("ignored")
        (1, 1, 1)
        >>> len(calls)
        1
    """
    slot: list[Any] = [_MISSING]

    @functools.wraps(func)
    def wrapper(*_args: Any, **_kwargs: Any) -> T:
        if slot[0] is _MISSING:
            slot[0] = func()
        return slot[0]

    def cache_clear() -> None:
        slot[0] = _MISSING

    wrapper.cache_clear = cache_clear  # type: ignore[attr-defined]
    return wrapper


def retry(
    func: Callable[[], T],
    attempts: int,
    *,
    on_exhausted: OnExhausted = OnExhausted.RAISE,
) -> Callable[[], T | None]:
    """Return a wrapper that re-invokes *func* on failure, *attempts* failures in total.

    The failure counter belongs to the wrapper and is never reset: a call
    keeps retrying while the wrapper has failed fewer than *attempts* times
    over its whole life. Once the budget is spent, each further call makes
    a single attempt and then applies *on_exhausted*. Build a new wrapper to
    get a fresh budget.

    Only ``Exception`` subclasses count as failures; ``KeyboardInterrupt``
    and friends pass straight through.

    Args:
        func: Zero-argument callable to invoke.
        attempts: Number of failures the wrapper tolerates before giving up.
        on_exhausted: ``OnExhausted.RAISE`` re-raises the last failure,
            ``OnExhausted.NONE`` returns ``None`` instead.

    Raises:
        ValueError: If *attempts* is not a positive integer.

    Example:
        >>> state = {"calls": 0}
        >>> def flaky():
        ...     state["calls"] += 1
        ...     if state["calls"] % 2:
        ...         raise RuntimeError("odd call")
        ...     return state["calls"]
        >>> retryer = retry(flaky, 2)
        >>> retryer()
        2
        >>> retryer()
        Traceback (most recent call last):
        ...
        RuntimeError: odd call
    """
    if isinstance(attempts, bool) or not isinstance(attempts, int) or attempts < 1:
        raise ValueError(f"attempts must be a positive integer, got {attempts!r}")
    policy = OnExhausted(on_exhausted)
    failures = [0]

    @functools.wraps(func)
    def retrying() -> T | None:
        while True:
            try:
                return func()
            except Exception:
                failures[0] += 1
                if failures[0] >= attempts:
                    if policy is OnExhausted.NONE:
                        return None
                    raise

    return retrying


def _json_default(value: Any) -> Any:
    if isinstance(value, (set, frozenset)):
        return list(value)
    return str(value)


def _render_argument(value: Any) -> str:
    """Render one call argument the way the starts/ends lines show it.

    Example:
        >>> _render_argument("test"), _render_argument(3.5)
        ('test', '3.5')
        >>> _render_argument(["expected", "test", 1])
        '["expected","test",1]'
        >>> _render_argument(None), _render_argument(True)
        ('null', 'true')
    """
    if isinstance(value, str):
        return value
    if isinstance(value, Real) and not isinstance(value, bool):
        return str(value)
    try:
        return orjson.dumps(value, default=_json_default).decode("utf-8")
    except orjson.JSONEncodeError:
        # integers beyond 64 bits, non-str dict keys
        return str(value)


def render_call(name: str, args: Sequence[Any]) -> str:
    """Return ``name(arg1,arg2,...)`` for the given positional arguments.

    Example:
        >>> render_call("cos", [3.141592653589793])
        'cos(3.141592653589793)'
        >>> render_call("testLogger", [["expected", "test", 1], 0])
        'testLogger(["expected","test",1],0)'
    """
    return f"{name}({','.join(_render_argument(arg) for arg in args)})"


def logger(func: Callable[..., T], log_func: Callable[[str], Any]) -> Callable[..., T]:
    """Wrap *func* so every call is reported to *log_func* before and after.

    Each invocation emits ``"<name>(<args>) starts"``, calls *func*, then
    emits ``"<name>(<args>) ends"`` using the text rendered before the call.
    If *func* raises, the ends line is skipped and the exception propagates.

    Example:
        >>> import math
        >>> lines = []
        >>> cos_logger = logger(math.cos, lines.append)
        >>> cos_logger(math.pi)
        -1.0
        >>> lines
        ['cos(3.141592653589793) starts', 'cos(3.141592653589793) ends']
    """
    name = getattr(func, "__name__", type(func).__name__)

    @functools.wraps(func)
    def logged(*args: Any) -> T:
        call_text = render_call(name, args)
        log_func(f"{call_text} starts")
        result = func(*args)
        log_func(f"{call_text} ends")
        return result

    return logged


def partial_using_arguments(fn: Callable[..., T], *args: Any) -> Callable[..., T]:
    """Return *fn* with *args* bound as its leading positional arguments.

    Example:
        >>> concat = lambda a, b, c, d: a + b + c + d
        >>> partial_using_arguments(concat, "a")("b", "c", "d")
        'abcd'
        >>> partial_using_arguments(partial_using_arguments(concat, "a"), "b", "c")("d")
        'abcd'
    """
    return functools.partial(fn, *args)


def get_id_generator_function(start_from: int) -> Callable[[], int]:
    """Return a generator of consecutive ids beginning at *start_from*.

    Example:
        >>> get_id4, get_id10 = get_id_generator_function(4), get_id_generator_function(10)
        >>> get_id4(), get_id10(), get_id4(), get_id10()
        (4, 10, 5, 11)
    """
    counter = itertools.count(start_from)

    def next_id() -> int:
        return next(counter)

    return next_id


__all__ = [
    "get_composition",
    "get_id_generator_function",
    "get_polynom",
    "get_power_function",
    "logger",
    "memoize",
    "partial_using_arguments",
    "render_call",
    "retry",
]
