from typing import Any, Callable, List, Mapping, Optional, Sequence

from reflex_params.errors import ensure_callable
from reflex_params.params import BindingOptions, OnUnresolved, bound_function, list_parameters
from reflex_params.signatures import count_parameters


class Params:
    """Parameter metadata and binding for the callable behind a :class:`Facade`."""
    __slots__ = ("_facade",)

    def __init__(self, facade: 'Facade'):
        self._facade = facade

    def count(self) -> int:
        options = self._facade.options
        if options.params_list is not None:
            return len(options.params_list)
        return count_parameters(self._facade.identity)

    def list(self) -> List[str]:
        return list_parameters(self._facade.identity, self._facade.options)

    def bind(self, values: Mapping[str, Any]) -> 'Facade':
        """Return a new facade with *values* bound on top of the current ones.

        This facade is left untouched, so it can keep being bound in other
        directions.
        """
        return Facade(self._facade.identity, self._facade.options.extend(values))


class Facade:
    __slots__ = ("_identity", "_options", "_params")

    def __init__(self, identity: Callable[..., Any], options: BindingOptions):
        self._identity = identity
        self._options = options
        self._params = Params(self)

    @property
    def identity(self) -> Callable[..., Any]:
        return self._identity

    @property
    def options(self) -> BindingOptions:
        return self._options

    @property
    def params(self) -> Params:
        return self._params

    def is_callable(self) -> bool:
        return callable(self._identity)

    @property
    def fn(self) -> Any:
        """Call the wrapped callable with everything bound so far.

        Each read resolves and calls again; the result is never cached.
        """
        ensure_callable(self._identity)
        return bound_function(self._identity, self._options)()

    def __repr__(self):
        return f"{self.__class__.__name__}({self._identity!r}, layers={len(self._options.chain)})"


def reflex(
        fn: Callable[..., Any],
        context: Any = None,
        params_list: Optional[Sequence[str]] = None,
        on_unresolved: Optional[OnUnresolved] = None,
) -> Facade:
    """Wrap *fn* so its parameters can be bound by name.

    ``context`` is the receiver *fn* is invoked against, ``params_list``
    replaces the names read from *fn*'s source, and ``on_unresolved`` is
    called as ``on_unresolved(fn, name, layers)`` for every parameter no
    bound mapping supplies.

    Example usage:
    >>> def add(a, b):
    ...     return a + b
    >>> reflex(add).params.bind({'a': 1}).params.bind({'b': 2}).fn
    3
    """
    return Facade(fn, BindingOptions(context, params_list, (), on_unresolved))


create_facade = reflex
