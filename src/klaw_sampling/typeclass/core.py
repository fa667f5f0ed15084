"""@typeclass decorator and dispatch mechanism.

A typeclass is a polymorphic function whose implementation is chosen by the
type of its first argument. It is how the samplers are written once per
family (fixed-width integers, floats, sequences, distributions) and selected
per concrete value instead of through per-type subclasses.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

import wrapt

__all__ = ['NoInstanceError', 'TypeClass', 'typeclass']

F = TypeVar('F', bound=Callable[..., Any])


class NoInstanceError(TypeError):
    """Raised when no typeclass instance is registered for a type."""

    def __init__(self, typeclass_name: str, value_type: type) -> None:
        self.typeclass_name = typeclass_name
        self.value_type = value_type
        super().__init__(f"No instance of '{typeclass_name}' for type '{value_type.__name__}'")


class TypeClass(wrapt.ObjectProxy, Generic[F]):
    """A typeclass with registered type instances.

    Dispatch order is: exact type, then the type's MRO, then the decorated
    function itself when it was declared as a fallback (`fallback=True`).

    Example:
        ```python
        @typeclass
        def width(kind) -> int:
            '''Bit width of a numeric kind.'''

        @width.instance(IntKind)
        def _width_int(kind: IntKind) -> int:
            return kind.bits

        width(i32)
        # 32
        ```
    """

    def __init__(self, default_fn: F, *, fallback: bool = False) -> None:
        super().__init__(default_fn)
        self._self_name = default_fn.__name__
        self._self_default: F | None = default_fn if fallback else None
        self._self_instances: dict[type, Callable[..., Any]] = {}

    def instance(self, *types: type) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
        """Register an implementation for one or more types.

        Example:
            ```python
            @shuffled.instance(bytes, bytearray)
            def _shuffled_bytes(value, source, *, within=None): ...
            ```
        """

        def decorator(fn: Callable[..., Any]) -> Callable[..., Any]:
            for type_ in types:
                self._self_instances[type_] = fn
            return fn

        return decorator

    def dispatch(self, value_type: type) -> Callable[..., Any] | None:
        """Return the implementation that would handle `value_type`, if any."""
        for base in value_type.__mro__:
            if base in self._self_instances:
                return self._self_instances[base]
        return self._self_default

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Dispatch to the appropriate instance based on the first argument."""
        if not args:
            raise TypeError(f'{self._self_name}() requires at least one positional argument')

        instance_fn = self.dispatch(type(args[0]))
        if instance_fn is None:
            raise NoInstanceError(self._self_name, type(args[0]))
        return instance_fn(*args, **kwargs)

    def __repr__(self) -> str:
        return f'<typeclass {self._self_name} with {len(self._self_instances)} instances>'


def typeclass(fn: F | None = None, *, fallback: bool = False) -> Any:
    """Decorator to create a typeclass from a function signature.

    With `fallback=True` the decorated body handles any type that has no
    registered instance; otherwise such calls raise `NoInstanceError`.

    Args:
        fn: The function defining the typeclass signature.
        fallback: Whether the decorated body is the default implementation.

    Returns:
        A TypeClass, or a decorator producing one when called with options.
    """
    if fn is None:
        return lambda f: TypeClass(f, fallback=fallback)
    return TypeClass(fn, fallback=fallback)
