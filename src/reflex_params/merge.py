from typing import Any, Mapping, Optional


def merge(base: Optional[Mapping[str, Any]], *layers: Optional[Mapping[str, Any]]) -> dict[str, Any]:
    """Flatten *base* and *layers* into a fresh dict.

    Layers are applied left to right, so on a key collision the last one
    wins. Missing (falsy) layers count as empty and nothing passed in is
    modified.

    >>> merge({'a': 1, 'b': 1}, None, {'b': 2})
    {'a': 1, 'b': 2}
    """
    merged = dict(base or {})
    for layer in layers:
        merged.update(layer or {})
    return merged
