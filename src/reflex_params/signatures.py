"""Recover the declared parameter names of a callable from its source text.
"""
import inspect
import logging
import re
import textwrap
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

COMMENT_PATTERN = re.compile(r"#.*$", re.MULTILINE)
DEFINITION_PATTERN = re.compile(r"\b(def|lambda)\b")
NAME_PATTERN = re.compile(r"[^\s,]+")

RECEIVER_NAMES = ("self", "cls")
POSITIONAL_KINDS = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def is_positional(param: inspect.Parameter) -> bool:
    return param.kind in POSITIONAL_KINDS


def get_signature(fn: Callable[..., Any]) -> Optional[inspect.Signature]:
    try:
        return inspect.signature(fn)
    except (TypeError, ValueError):
        return None


def get_source(fn: Callable[..., Any]) -> Optional[str]:
    """Return the dedented source of *fn*, or None when Python cannot find it."""
    try:
        return textwrap.dedent(inspect.getsource(fn))
    except (OSError, TypeError):
        return None


def parse_parameter_names(source: str) -> list[str]:
    """Tokenize the parameter list out of a ``def`` or ``lambda`` source text.

    Comments are stripped, then everything between the first ``(`` and the
    first ``)`` following the definition keyword is split on whitespace and
    commas. Defaults, annotations and star markers come through as opaque
    tokens:

    >>> parse_parameter_names("def add(a, b):\\n    return a + b")
    ['a', 'b']
    >>> parse_parameter_names("def scale(x, factor=2): ...")
    ['x', 'factor=2']
    """
    text = COMMENT_PATTERN.sub("", source)
    keyword = DEFINITION_PATTERN.search(text)
    if keyword is not None:
        text = text[keyword.start():]
    if keyword is not None and keyword.group(1) == "lambda":
        end = text.find(":")
        if end == -1:
            return []
        params = text[keyword.end() - keyword.start():end]
    else:
        start, end = text.find("("), text.find(")")
        if start == -1 or end < start:
            return []
        params = text[start + 1:end]
    return NAME_PATTERN.findall(params)


def extract_parameter_names(fn: Callable[..., Any]) -> list[str]:
    """Return the ordered parameter names of *fn*.

    Names come from the source text when it is available, and from
    ``inspect.signature`` otherwise. A class header is not a parameter
    list, so classes always use their signature. Never raises: a callable
    with neither yields an empty list.
    """
    source = None if inspect.isclass(fn) else get_source(fn)
    if source is None:
        signature = get_signature(fn)
        logger.debug("Reading the parameters of %r from its signature", fn)
        return list(signature.parameters) if signature is not None else []
    names = parse_parameter_names(source)
    if inspect.ismethod(fn):
        # the receiver is already bound
        names = names[1:]
    return names


def has_receiver_slot(fn: Callable[..., Any]) -> bool:
    """True when the first declared parameter of *fn* is ``self`` or ``cls``."""
    signature = get_signature(fn)
    if signature is not None:
        names = list(signature.parameters)
    else:
        names = extract_parameter_names(fn)
    return bool(names) and names[0] in RECEIVER_NAMES


def count_parameters(fn: Callable[..., Any]) -> int:
    """The intrinsic arity of *fn*: how many positional parameters it declares."""
    signature = get_signature(fn)
    if signature is None:
        return 0
    return sum(1 for p in signature.parameters.values() if is_positional(p))
