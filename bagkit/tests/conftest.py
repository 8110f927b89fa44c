from __future__ import annotations

from typing import Type

import pytest

from bagkit.interface.bag import Bag
from bagkit.storage.array_bag import ArrayBag
from bagkit.storage.chain_bag import ChainBag


@pytest.fixture(params=[ArrayBag, ChainBag])
def bag_cls(request) -> Type[Bag]:
    """Each storage variant in turn, so that contract tests run against both."""
    return request.param


@pytest.fixture
def first_bag(bag_cls: Type[Bag]) -> Bag[int]:
    """Returns a bag holding 0-4."""
    return bag_cls(range(0, 5))


@pytest.fixture
def second_bag(bag_cls: Type[Bag]) -> Bag[int]:
    """Returns a bag holding 3-9."""
    return bag_cls(range(3, 10))
