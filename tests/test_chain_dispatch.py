from __future__ import annotations

import pytest

from jogger import Jogger, NoSuchOperationError, TraversalDispatchError, TraversalRegistry, UnknownTraversalError


class _FakeQueryResult:
    def some_existing_operation(self):
        return "is_there"


class _Node:
    label = "node"

    def __init__(self, edges):
        self.edges = list(edges)

    def out(self, *, limit=None):
        return self.edges[:limit]

    def explode(self):
        raise KeyError("boom")


def _registry() -> TraversalRegistry:
    registry = TraversalRegistry()
    registry.register("double", lambda state, x: (state or 1) * x)
    registry.register("worked", lambda state: "worked")
    registry.register("sum", lambda state, x, y: x + y)
    registry.register("wrap", lambda state: _FakeQueryResult())
    return registry


def test_named_traversal_replaces_state() -> None:
    chain = Jogger(registry=_registry())
    chain.double(2)
    assert chain.result() == 2


def test_named_traversals_chain_left_to_right() -> None:
    registry = _registry()
    registry.register("inc", lambda state: state + 1)

    assert Jogger(registry=registry).double(2).double(3).result() == 6
    assert Jogger(5, registry=registry).inc().double(2).result() == 12
    assert Jogger(5, registry=registry).double(2).inc().result() == 11


def test_traversal_without_arguments() -> None:
    assert Jogger(registry=_registry()).worked().result() == "worked"


def test_traversal_with_two_arguments() -> None:
    chain = Jogger(registry=_registry())
    chain.sum(3, 7)
    assert chain.result() == 10


def test_invoke_matches_direct_call() -> None:
    registry = _registry()
    chain = Jogger(4, registry=registry)
    assert chain.invoke("double", 3) is chain
    assert chain.result() == registry.get("double")(4, 3)


def test_unknown_name_raises_composite_error() -> None:
    chain = Jogger(registry=_registry())
    with pytest.raises(TraversalDispatchError) as info:
        chain.doesNotExist()

    assert str(info.value) == (
        "Unknown traversal doesNotExist. From (Unknown traversal doesNotExist) "
        "via ('NoneType' object has no attribute 'doesNotExist')"
    )
    assert isinstance(info.value.unknown, UnknownTraversalError)
    assert isinstance(info.value.missing, NoSuchOperationError)
    assert info.value.name == "doesNotExist"


def test_delegates_to_state_after_named_traversal() -> None:
    result = Jogger(registry=_registry()).wrap().some_existing_operation().result()
    assert result == "is_there"


def test_delegation_passes_positional_and_keyword_arguments() -> None:
    node = _Node(["a", "b", "c"])
    assert Jogger(node, registry=TraversalRegistry()).out(limit=2).result() == ["a", "b"]
    assert Jogger([3, 1, 2], registry=TraversalRegistry()).index(2).result() == 2


def test_named_traversal_receives_keyword_arguments() -> None:
    registry = TraversalRegistry()
    registry.register("scale", lambda state, *, by=1: state * by)
    assert Jogger(3, registry=registry).scale(by=4).result() == 12


def test_named_traversal_takes_precedence_over_state_operation() -> None:
    registry = TraversalRegistry()
    registry.register("upper", lambda state: "from registry")
    assert Jogger("abc", registry=registry).upper().result() == "from registry"
    assert Jogger("abc", registry=TraversalRegistry()).upper().result() == "ABC"


def test_non_callable_attribute_is_not_an_operation() -> None:
    chain = Jogger(_Node([]), registry=TraversalRegistry())
    with pytest.raises(TraversalDispatchError, match="'_Node' object attribute 'label' is not callable"):
        chain.label()


def test_operation_failure_propagates_and_keeps_state() -> None:
    node = _Node([])
    chain = Jogger(node, registry=TraversalRegistry())
    with pytest.raises(KeyError, match="boom"):
        chain.explode()
    assert chain.result() is node


def test_traversal_failure_propagates_unchanged() -> None:
    registry = TraversalRegistry()
    registry.register("fail", lambda state: 1 / 0)
    chain = Jogger("start", registry=registry)
    with pytest.raises(ZeroDivisionError):
        chain.fail()
    assert chain.result() == "start"


def test_arity_mismatch_is_not_reported_as_missing() -> None:
    registry = _registry()
    with pytest.raises(TypeError):
        Jogger(registry=registry).sum(1)
    with pytest.raises(TypeError):
        Jogger(_FakeQueryResult(), registry=registry).some_existing_operation("extra")


def test_chain_stays_usable_after_failure() -> None:
    chain = Jogger(registry=_registry())
    chain.double(2)
    with pytest.raises(TraversalDispatchError):
        chain.missing_step()
    assert chain.result() == 2
    assert chain.double(5).result() == 10


def test_result_is_pure_accessor() -> None:
    chain = Jogger([1, 2], registry=TraversalRegistry())
    assert chain.result() == [1, 2]
    assert chain.result() == [1, 2]
    assert chain.count(1).result() == 1


def test_underscore_names_are_not_dispatched() -> None:
    registry = TraversalRegistry()
    registry.register("double", lambda state, x: state * x)
    chain = Jogger(2, registry=registry)
    with pytest.raises(AttributeError):
        chain._hidden()
    assert not hasattr(chain, "__deepcopy_hook__")
    assert chain.result() == 2


def test_injected_registry_is_isolated_from_default() -> None:
    from jogger import named_traversals

    named_traversals.register("only_in_default", lambda state: "default")
    try:
        with pytest.raises(TraversalDispatchError):
            Jogger(registry=TraversalRegistry()).only_in_default()
        assert Jogger().only_in_default().result() == "default"
    finally:
        named_traversals.unregister("only_in_default")


def test_repr_shows_state() -> None:
    assert repr(Jogger([1], registry=TraversalRegistry())) == "Jogger([1])"


def test_keyword_arguments_named_like_dispatch_parameters() -> None:
    registry = TraversalRegistry()
    registry.register("tag", lambda state, *, name, state_key="s": {state_key: state, "name": name})
    result = Jogger(1, registry=registry).tag(name="n", state_key="k").result()
    assert result == {"k": 1, "name": "n"}
