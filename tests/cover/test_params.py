import pytest

from reflex_params import BindingOptions, bound_function, list_parameters, resolve_arguments
from reflex_params.signatures import has_receiver_slot


def add(a, b):
    return a + b


def collect(*args):
    return args


class Counter:
    def __init__(self, start):
        self.start = start

    def advance(self, step):
        return self.start + step


def test_extend_returns_new_options():
    layer = {'a': 1}
    options = BindingOptions(context="ctx", params_list=["a"])
    extended = options.extend(layer)
    assert options.chain == ()
    assert extended.chain == (layer,)
    assert extended.context == "ctx"
    assert extended.params_list == ["a"]


def test_extend_with_the_newest_layer_keeps_the_chain():
    layer = {'a': 1}
    options = BindingOptions().extend(layer)
    assert options.extend(layer).chain is options.chain
    assert len(options.extend({'a': 1}).chain) == 2


def test_params_list_is_copied():
    names = ["a", "b"]
    options = BindingOptions(params_list=names)
    names.append("c")
    assert list_parameters(add, options) == ["a", "b"]


def test_list_parameters_extracts_without_override():
    assert list_parameters(add) == ["a", "b"]
    assert list_parameters(add, BindingOptions()) == ["a", "b"]


def test_resolve_arguments_fills_gaps_with_none():
    options = BindingOptions(chain=({'b': 2},))
    assert resolve_arguments(add, ["a", "b"], options) == [None, 2]


def test_resolve_arguments_asks_the_callback_for_missing_names():
    layers = ({'a': 1}, {'c': 3})
    seen = []

    def on_unresolved(fn, name, chain):
        seen.append((fn, name, chain))
        return name.upper()

    options = BindingOptions(chain=layers, on_unresolved=on_unresolved)
    assert resolve_arguments(add, ["a", "b", "c"], options) == [1, "B", 3]
    assert seen == [(add, "b", layers)]


def test_bound_values_win_over_the_callback_even_when_none():
    options = BindingOptions(chain=({'a': None},), on_unresolved=lambda fn, name, chain: 0)
    assert resolve_arguments(add, ["a"], options) == [None]


def test_thunk_calls_positionally():
    thunk = bound_function(add, BindingOptions(chain=({'a': 1, 'b': 100}, {'b': 2})))
    assert thunk() == 3


def test_thunk_resolves_on_every_call():
    layer = {'a': 1, 'b': 1}
    thunk = bound_function(add, BindingOptions(chain=(layer,)))
    assert thunk() == 2
    layer['b'] = 41
    assert thunk() == 42


def test_extra_names_are_passed_through():
    thunk = bound_function(collect, BindingOptions(params_list=["x", "y", "z"], chain=({'x': 1, 'z': 3},)))
    assert thunk() == (1, None, 3)


def test_context_fills_the_receiver_slot():
    counter = Counter(10)
    calls = []

    def on_unresolved(fn, name, chain):
        calls.append(name)

    thunk = bound_function(Counter.advance, BindingOptions(
        context=counter, chain=({'step': 5},), on_unresolved=on_unresolved,
    ))
    assert thunk() == 15
    assert calls == []


def test_context_rebinds_a_bound_method():
    method = Counter(10).advance
    assert bound_function(method, BindingOptions(chain=({'step': 1},)))() == 11
    assert bound_function(method, BindingOptions(context=Counter(100), chain=({'step': 1},)))() == 101


def test_params_list_with_context_names_only_the_arguments():
    thunk = bound_function(Counter.advance, BindingOptions(
        context=Counter(1), params_list=["how_far"], chain=({'how_far': 2},),
    ))
    assert thunk() == 3


def test_errors_from_the_callable_propagate():
    with pytest.raises(TypeError):
        bound_function(add, BindingOptions())()


def test_context_is_unused_without_a_receiver_slot():
    thunk = bound_function(add, BindingOptions(context=100, chain=({'a': 1, 'b': 2},)))
    assert thunk() == 3
    thunk = bound_function(add, BindingOptions(context=100, params_list=["y", "x"], chain=({'x': 1, 'y': 2},)))
    assert thunk() == 3


def test_receiver_slot_is_the_first_declared_self_or_cls():
    assert has_receiver_slot(Counter.advance)
    assert has_receiver_slot(lambda cls, x: x)
    assert not has_receiver_slot(add)
    assert not has_receiver_slot(collect)
    assert not has_receiver_slot(42)
