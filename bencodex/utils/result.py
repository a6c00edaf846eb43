# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
The value returned by `try_decode()` and `try_encode()`: `Ok(value)` on success, `Err(error)` with the codec error
that would have been raised otherwise.

>>> from bencodex import try_decode
>>> try_decode(b'i3e')
Ok(BInteger(3))
>>> result = try_decode(b'i03e')
>>> result.is_err(), result.err().position
(True, 2)
>>> result.unwrap_or(None) is None
True
>>> result.unwrap()
Traceback (most recent call last):
...
bencodex.utils.result.UnwrapError: Called `Result.unwrap()` on an `Err` value: InvalidIntegerError(...)
"""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, ClassVar, Generic, NoReturn, ParamSpec, Type, TypeAlias, TypeVar

from typing_extensions import TypeIs

T = TypeVar('T', covariant=True)  # Success type
E = TypeVar('E', covariant=True)  # Error type
U = TypeVar('U')
P = ParamSpec('P')
TE = TypeVar('TE', bound=Exception)


class _Variant:
    """Storage, comparison and repr shared by `Ok` and `Err`, two variants are equal only if they are the same kind."""

    __slots__ = ('_value',)
    __match_args__ = ('_value',)

    _is_ok: ClassVar[bool]

    def __init__(self, value: Any) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._value!r})'

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self._value == other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((self._is_ok, self._value))

    def is_ok(self) -> bool:
        return self._is_ok

    def is_err(self) -> bool:
        return not self._is_ok


class Ok(_Variant, Generic[T]):
    """The call succeeded, `ok()` and `unwrap()` return its value."""

    __slots__ = ()
    _is_ok = True

    def ok(self) -> T:
        return self._value

    def err(self) -> None:
        return None

    def unwrap(self) -> T:
        return self._value

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(self, 'Called `Result.unwrap_err()` on an `Ok` value')

    def unwrap_or(self, _default: U) -> T:
        return self._value


class Err(_Variant, Generic[E]):
    """The call failed, `err()` and `unwrap_err()` return the error."""

    __slots__ = ()
    _is_ok = False

    def ok(self) -> None:
        return None

    def err(self) -> E:
        return self._value

    def unwrap(self) -> NoReturn:
        # chained so the traceback still shows where the codec error came from
        exc = UnwrapError(self, f'Called `Result.unwrap()` on an `Err` value: {self._value!r}')
        if isinstance(self._value, BaseException):
            raise exc from self._value
        raise exc

    def unwrap_err(self) -> E:
        return self._value

    def unwrap_or(self, default: U) -> U:
        return default


Result: TypeAlias = Ok[T] | Err[E]


class UnwrapError(Exception):
    """Raised by `unwrap()` and `unwrap_err()` on the wrong variant, the variant is kept in `.result`."""

    def __init__(self, result: Result[Any, Any], message: str) -> None:
        super().__init__(message)
        self.result = result


def as_result(*exceptions: Type[TE]) -> Callable[[Callable[P, T]], Callable[P, Result[T, TE]]]:
    """
    Make a decorator that returns `Ok(return_value)`, or `Err(exc)` when one of `exceptions` is raised.

    Other exceptions propagate unchanged.
    """
    if not exceptions or not all(
        inspect.isclass(exception) and issubclass(exception, BaseException)
        for exception in exceptions
    ):
        raise TypeError('as_result() requires one or more exception types')

    def decorator(f: Callable[P, T]) -> Callable[P, Result[T, TE]]:
        @functools.wraps(f)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, TE]:
            try:
                return Ok(f(*args, **kwargs))
            except exceptions as exc:
                return Err(exc)

        return wrapper

    return decorator


def is_ok(result: Result[T, E]) -> TypeIs[Ok[T]]:
    return result.is_ok()


def is_err(result: Result[T, E]) -> TypeIs[Err[E]]:
    return result.is_err()
