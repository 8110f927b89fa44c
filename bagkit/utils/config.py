"""Loading of the settings for `bagkit` commands.

Each command describes its settings as a dataclass (e.g. `DemoConfig` for `bagkit demo`, which picks
the bag variant, its capacity limits and the values put in each bag). The values can then be
given in YAML files passed with `--config`, or one at a time as `key=value` arguments such as
`bag_class=ChainBag` or `first=[1,1,2]`.
"""

import argparse
import sys
from typing import Any, Callable, Dict, List, Optional, Tuple, TypeVar, Union, cast

from omegaconf import DictConfig, ListConfig, OmegaConf

ConfigT = TypeVar("ConfigT")

ConfigSource = Union[DictConfig, ListConfig]


def _split_arguments(argv: List[str]) -> Tuple[List[str], List[str]]:
    """Separates `--config` file paths from the `key=value` overrides."""
    parser = argparse.ArgumentParser(allow_abbrev=False)
    parser.add_argument(
        "--config",
        dest="config_files",
        metavar="PATH",
        action="append",
        default=[],
        help="YAML file with bag settings; repeat to layer several files.",
    )
    known, overrides = parser.parse_known_args(argv)
    return known.config_files, overrides


def get_config(
    argv: Optional[List[str]],
    config_cls: Callable[..., ConfigT],
    defaults: Optional[Dict[str, Any]] = None,
) -> ConfigT:
    """
    Builds the settings of a `bagkit` command.

    Args:
        argv: Arguments after the command name; `sys.argv[1:]` when `None`.
        config_cls: Dataclass listing the settings of the command and their default values.
        defaults: Values replacing some of the dataclass defaults (used e.g. by tests).

    Returns:
        Read-only config that behaves like an instance of `config_cls`. When a setting is given
        more than once, the last source wins: dataclass, `defaults`, each `--config` file in
        order, then the `key=value` arguments.
    """
    config_files, overrides = _split_arguments(sys.argv[1:] if argv is None else argv)

    sources: List[ConfigSource] = [OmegaConf.structured(config_cls)]
    if defaults:
        sources.append(OmegaConf.create(defaults))
    for path in config_files:
        sources.append(OmegaConf.load(path))
    sources.append(OmegaConf.from_dotlist(overrides))

    config = OmegaConf.merge(*sources)
    OmegaConf.set_readonly(config, True)
    return cast(ConfigT, config)
