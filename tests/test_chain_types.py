"""Tests for the Chain and Node data model."""

from dataclasses import FrozenInstanceError

import pytest

from src.chain.types import Chain, Node


def _make_chain() -> Chain:
    return Chain(
        nodes={
            "start": Node(text="a", links={"stop": 0.5, "next": 0.5}),
            "next": Node(text="b", links={"start": 1.0}),
        },
        start="start",
        end="stop",
    )


class TestNode:
    """Node link ordering and immutability."""

    def test_ordered_links_sorted_by_target(self) -> None:
        node = Node(text="x", links={"z": 0.2, "a": 0.3, "m": 0.5})
        assert node.ordered_links() == (("a", 0.3), ("m", 0.5), ("z", 0.2))

    def test_total_weight(self) -> None:
        node = Node(text="x", links={"a": 0.25, "b": 0.75})
        assert node.total_weight() == 1.0

    def test_links_read_only(self) -> None:
        node = Node(text="x", links={"a": 1.0})
        with pytest.raises(TypeError):
            node.links["b"] = 0.0  # type: ignore[index]

    def test_source_dict_copied(self) -> None:
        links = {"a": 1.0}
        node = Node(text="x", links=links)
        links["b"] = 2.0
        assert "b" not in node.links

    def test_frozen(self) -> None:
        node = Node(text="x")
        with pytest.raises(FrozenInstanceError):
            node.text = "y"  # type: ignore[misc]


class TestChain:
    """Chain accessors."""

    def test_accessors(self) -> None:
        chain = _make_chain()
        assert chain.start_node.text == "a"
        assert chain.node("next").text == "b"
        assert len(chain) == 2
        assert "next" in chain
        assert "stop" not in chain
        assert chain.node_ids() == ["next", "start"]

    def test_is_terminal(self) -> None:
        chain = _make_chain()
        assert chain.is_terminal("stop")
        assert not chain.is_terminal("start")

    def test_undefined_node_raises(self) -> None:
        with pytest.raises(KeyError):
            _make_chain().node("stop")

    def test_equality_ignores_insertion_order(self) -> None:
        other = Chain(
            nodes={
                "next": Node(text="b", links={"start": 1.0}),
                "start": Node(text="a", links={"next": 0.5, "stop": 0.5}),
            },
            start="start",
            end="stop",
        )
        assert other == _make_chain()

    def test_nodes_read_only(self) -> None:
        with pytest.raises(TypeError):
            _make_chain().nodes["x"] = Node(text="x")  # type: ignore[index]
