import functools
import inspect
import logging
from typing import Any, Callable, Mapping, Optional, Sequence

from reflex_params.merge import merge
from reflex_params.signatures import extract_parameter_names, has_receiver_slot

logger = logging.getLogger(__name__)

Layer = Mapping[str, Any]
OnUnresolved = Callable[[Callable[..., Any], str, tuple[Layer, ...]], Any]


class BindingOptions:
    """Everything a facade needs to turn named values into a positional call.

    ``chain`` is a tuple of the bound mappings, oldest first. It is never
    appended to in place: :meth:`extend` hands back a new set of options.
    """
    __slots__ = ("context", "params_list", "chain", "on_unresolved")

    def __init__(
            self,
            context: Any = None,
            params_list: Optional[Sequence[str]] = None,
            chain: Sequence[Layer] = (),
            on_unresolved: Optional[OnUnresolved] = None,
    ):
        self.context = context
        self.params_list = list(params_list) if params_list is not None else None
        self.chain = tuple(chain)
        self.on_unresolved = on_unresolved

    def extend(self, layer: Layer) -> 'BindingOptions':
        if self.chain and self.chain[-1] is layer:
            logger.debug("Layer %r is already the newest binding, chain left as is", layer)
            chain = self.chain
        else:
            chain = self.chain + (layer,)
        return BindingOptions(self.context, self.params_list, chain, self.on_unresolved)

    def __repr__(self):
        return (f"{self.__class__.__name__}(context={self.context!r}, params_list={self.params_list!r}, "
                f"chain={self.chain!r}, on_unresolved={self.on_unresolved!r})")


def list_parameters(fn: Callable[..., Any], options: Optional[BindingOptions] = None) -> list[str]:
    if options is not None and options.params_list is not None:
        return list(options.params_list)
    return extract_parameter_names(fn)


def _receiver_call(fn: Callable[..., Any], context: Any) -> tuple[Callable[..., Any], int]:
    """Return the callable to invoke with *context* as receiver, and how many
    extracted names that receiver takes up.

    Only a bound method or a function declaring ``self``/``cls`` first has a
    receiver slot; anything else is called as is and *context* is unused.
    """
    if context is None:
        return fn, 0
    if inspect.ismethod(fn):
        return functools.partial(fn.__func__, context), 0
    if has_receiver_slot(fn):
        return functools.partial(fn, context), 1
    logger.debug("%r has no receiver slot, ignoring context %r", fn, context)
    return fn, 0


def resolve_arguments(fn: Callable[..., Any], names: Sequence[str], options: BindingOptions) -> list[Any]:
    """Map *names* to positional values using the merged binding chain.

    A name missing from every layer is handed to ``on_unresolved`` when one
    is configured, and resolves to None otherwise.
    """
    values = merge({}, *options.chain)
    logger.debug("Resolving %r for %r over %d layers", names, fn, len(options.chain))
    arguments = []
    for name in names:
        if name in values:
            arguments.append(values[name])
        elif options.on_unresolved is not None:
            arguments.append(options.on_unresolved(fn, name, options.chain))
        else:
            arguments.append(None)
    return arguments


def bound_function(fn: Callable[..., Any], options: BindingOptions) -> Callable[[], Any]:
    """Return a thunk calling *fn* with its parameters filled in by name.

    Nothing is computed up front: every call of the thunk lists the
    parameters, merges the chain and resolves the arguments again, so
    changes to the bound mappings made in between are picked up.
    """
    def thunk() -> Any:
        target, skip = _receiver_call(fn, options.context)
        names = list_parameters(fn, options)
        if options.params_list is None:
            names = names[skip:]
        return target(*resolve_arguments(fn, names, options))

    return thunk
