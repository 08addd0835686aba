"""Properties that hold for every chain, checked over generated samples."""

from __future__ import annotations

import itertools
import random

from errkit.chain.grouping import grouping_id
from errkit.chain.model import ErrorChain, ErrorDescription, ErrorNode
from errkit.chain.render import render

KINDS = (
    "RequestError.timeout",
    "RequestError.rejected",
    "NetworkError.connection_lost",
    "NetworkError.no_internet",
    "DatabaseError.operation_failed",
    "SocketError [Struct]",
    "TimeoutError [Class]",
)


def _chain(kinds: tuple[str, ...], *, value: str = "x", message: str = "failed") -> ErrorChain:
    *outer, last = kinds
    nodes = [ErrorNode.wrapper(ErrorDescription(kind, (("value", value),), is_variant=True)) for kind in outer]
    nodes.append(ErrorNode.leaf(ErrorDescription(last, (("value", value),)), message))
    return ErrorChain(tuple(nodes))


def _skeletons() -> list[tuple[str, ...]]:
    """Every kind sequence of length 1 to 3 over KINDS."""
    return [
        kinds
        for depth in range(1, 4)
        for kinds in itertools.product(KINDS, repeat=depth)
    ]


def test_render_and_grouping_are_deterministic() -> None:
    for kinds in _skeletons()[:50]:
        assert render(_chain(kinds)) == render(_chain(kinds))
        assert grouping_id(_chain(kinds)) == grouping_id(_chain(kinds))


def test_grouping_ignores_parameters_and_messages() -> None:
    rng = random.Random(1234)
    for kinds in rng.sample(_skeletons(), 40):
        first = _chain(kinds, value=str(rng.random()), message="one")
        second = _chain(kinds, value=str(rng.random()), message="two")
        assert render(first) != render(second)
        assert grouping_id(first) == grouping_id(second)


def test_distinct_skeletons_get_distinct_ids() -> None:
    skeletons = _skeletons()
    ids = {grouping_id(_chain(kinds), length=12) for kinds in skeletons}
    assert len(ids) == len(skeletons)


def test_distinct_skeletons_rarely_collide_at_default_length() -> None:
    rng = random.Random(99)
    sample = rng.sample(_skeletons(), 60)
    ids = {grouping_id(_chain(kinds)) for kinds in sample}
    assert len(ids) == len(sample)
