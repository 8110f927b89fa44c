"""Script for showing the bag combinators on two small bags of integers.

Example invocation:
    python ./bagkit/cli/demo.py \
        bag_class=ChainBag \
        first=[0,1,2,3,4] \
        second=[3,4,5,6,7,8,9] \
        results_file=results.yml
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from bagkit.interface.bag import Bag
from bagkit.storage.array_bag import MAX_CAPACITY, ArrayBag
from bagkit.storage.chain_bag import ChainBag
from bagkit.utils.config import get_config as cli_get_config

logger = logging.getLogger(__file__)


class BagClass(Enum):
    ArrayBag = ArrayBag
    ChainBag = ChainBag


@dataclass
class DemoConfig:
    """Config for running the demo on two bags."""

    bag_class: BagClass = BagClass.ArrayBag  # Storage variant used for both bags

    first: List[int] = field(default_factory=lambda: list(range(0, 5)))
    second: List[int] = field(default_factory=lambda: list(range(3, 10)))

    # Only used by `ArrayBag`
    initial_capacity: Optional[int] = None  # Defaults to `min(DEFAULT_CAPACITY, max_capacity)`
    max_capacity: int = MAX_CAPACITY

    results_file: Optional[str] = None  # Where to save the results as YAML (if at all)


def make_bag(config: DemoConfig, values: List[int]) -> Bag[int]:
    if config.bag_class == BagClass.ArrayBag:
        return ArrayBag(
            values,
            initial_capacity=config.initial_capacity,
            max_capacity=config.max_capacity,
        )
    else:
        return config.bag_class.value(values)


def run_from_config(config: DemoConfig) -> Dict[str, List[Any]]:
    logger.info(f"Building two bags of class {config.bag_class.name}")

    first = make_bag(config, list(config.first))
    second = make_bag(config, list(config.second))

    results: Dict[str, List[Any]] = {
        "first": first.to_sequence(),
        "second": second.to_sequence(),
        "union": first.union(second).to_sequence(),
        "intersection": first.intersection(second).to_sequence(),
        "difference": first.difference(second).to_sequence(),
    }

    print(f"Bag 1 = {results['first']}")
    print(f"Bag 2 = {results['second']}")
    print()
    print(f"Union of bag 1 and bag 2: {results['union']}")
    print(f"Intersection of bag 1 and bag 2: {results['intersection']}")
    print(f"Difference between bag 1 and bag 2: {results['difference']}")

    if config.results_file is not None:
        results_path = Path(config.results_file)
        logger.info(f"Saving results to {results_path}")

        with open(results_path, "wt") as f_results:
            yaml.safe_dump(results, f_results, default_flow_style=None, sort_keys=False)

    return results


def main(argv: Optional[List[str]] = None) -> Dict[str, List[Any]]:
    config: DemoConfig = cli_get_config(argv=argv, config_cls=DemoConfig)
    return run_from_config(config)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
