import logging

from reflex_params.errors import NotCallableError, ReflexError, ensure_callable
from reflex_params.facade import Facade, Params, create_facade, reflex
from reflex_params.merge import merge
from reflex_params.params import BindingOptions, bound_function, list_parameters, resolve_arguments
from reflex_params.signatures import count_parameters, extract_parameter_names, parse_parameter_names

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BindingOptions",
    "Facade",
    "NotCallableError",
    "Params",
    "ReflexError",
    "bound_function",
    "count_parameters",
    "create_facade",
    "ensure_callable",
    "extract_parameter_names",
    "list_parameters",
    "merge",
    "parse_parameter_names",
    "reflex",
    "resolve_arguments",
]
