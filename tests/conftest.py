"""Shared fixtures for unrolledlist tests."""

from collections.abc import Callable

import pytest

from unrolledlist import UnrolledList


def _check_structure(lst: UnrolledList) -> None:
    nodes = lst.nodes()
    assert sum(len(node) for node in nodes) == len(lst)
    assert all(len(node) <= lst.node_capacity for node in nodes)
    for node in nodes[:-1]:
        assert len(node) >= lst.node_capacity // 2
    if nodes:
        assert len(nodes[-1]) >= 1


@pytest.fixture
def check_structure() -> Callable[[UnrolledList], None]:
    """Assert size accounting and the half-full rule on a list."""
    return _check_structure
