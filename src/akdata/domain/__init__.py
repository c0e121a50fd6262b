"""Domain model of the assembled game data.

This package hosts everything that runs after the raw tables are decoded:

* Frozen dataclasses describing every resolved entity (see :mod:`models`).
* Enumerations and the raw-tag lookup tables (:mod:`enums`, :mod:`tags`).
* The description renderer (:mod:`templates`) and attribute curves
  (:mod:`attributes`).
* Assembly configuration (:mod:`rules_config`) and the resolvers that turn
  a raw table set into :class:`~akdata.domain.models.GameData`
  (:mod:`operators`, :mod:`assembly`).
"""

from . import (
    assembly,
    attributes,
    enums,
    errors,
    models,
    operators,
    rules_config,
    tags,
    templates,
)

__all__ = [
    "assembly",
    "attributes",
    "enums",
    "errors",
    "models",
    "operators",
    "rules_config",
    "tags",
    "templates",
]
