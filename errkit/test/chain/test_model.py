"""Tests for errkit.chain.model module."""

from __future__ import annotations

import pytest

from errkit.chain.model import ErrorChain, ErrorDescription, ErrorNode


def _leaf(kind: str = "SocketError [Struct]", message: str = "No network connection.") -> ErrorNode:
    return ErrorNode.leaf(ErrorDescription(kind), message)


class TestErrorNode:
    def test_wrapper_has_no_message(self) -> None:
        node = ErrorNode.wrapper(ErrorDescription("RequestError.timeout", is_variant=True))
        assert node.is_leaf is False
        assert node.leaf_message is None

    def test_leaf_requires_message(self) -> None:
        with pytest.raises(ValueError, match="requires a non-empty leaf_message"):
            ErrorNode(kind="X [Class]", is_leaf=True)

    def test_leaf_rejects_empty_message(self) -> None:
        with pytest.raises(ValueError, match="requires a non-empty leaf_message"):
            ErrorNode.leaf(ErrorDescription("X [Class]"), "")

    def test_wrapper_rejects_message(self) -> None:
        with pytest.raises(ValueError, match="cannot carry"):
            ErrorNode(kind="X [Class]", leaf_message="nope")

    def test_label_inlines_variant_parameters(self) -> None:
        node = ErrorNode.leaf(
            ErrorDescription("FileError.not_found", (("path", "/a"), ("mode", "r")), is_variant=True),
            "missing",
        )
        assert node.label == "FileError.not_found(path: /a, mode: r)"

    def test_label_without_parameters(self) -> None:
        node = ErrorNode.wrapper(ErrorDescription("NetworkError.timeout", is_variant=True))
        assert node.label == "NetworkError.timeout"

    def test_label_ignores_data_on_aggregates(self) -> None:
        node = ErrorNode.wrapper(ErrorDescription("SocketError [Struct]", (("port", "1"),)))
        assert node.label == "SocketError [Struct]"


class TestErrorChain:
    def test_single_leaf(self) -> None:
        chain = ErrorChain((_leaf(),))
        assert len(chain) == 1
        assert chain.root is chain.leaf

    def test_accessors(self) -> None:
        root = ErrorNode.wrapper(ErrorDescription("RequestError.timeout", is_variant=True))
        chain = ErrorChain((root, _leaf()))
        assert chain.root is root
        assert chain[1].is_leaf
        assert chain.kinds == ("RequestError.timeout", "SocketError [Struct]")
        assert [node.kind for node in chain] == list(chain.kinds)

    def test_empty_chain_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least one node"):
            ErrorChain(())

    def test_leaf_must_be_last(self) -> None:
        wrapper = ErrorNode.wrapper(ErrorDescription("A.x", is_variant=True))
        with pytest.raises(ValueError, match="exactly one leaf"):
            ErrorChain((_leaf(), wrapper))

    def test_missing_leaf_rejected(self) -> None:
        wrapper = ErrorNode.wrapper(ErrorDescription("A.x", is_variant=True))
        with pytest.raises(ValueError, match="exactly one leaf"):
            ErrorChain((wrapper,))

    def test_two_leaves_rejected(self) -> None:
        with pytest.raises(ValueError, match="exactly one leaf"):
            ErrorChain((_leaf(), _leaf()))

    def test_frozen(self) -> None:
        chain = ErrorChain((_leaf(),))
        with pytest.raises(AttributeError):
            chain.nodes = ()  # type: ignore[misc]
