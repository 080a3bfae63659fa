"""
Deductive strategies.

A strategy is a plain function that reads a :class:`CellBoard` and returns
the modifications it can justify, or an empty list. The logical solver
tries them in :data:`DEFAULT_STRATEGIES` order, cheapest first.
"""

from typing import Callable, Dict, List, Sequence

from ..core.cells import CellBoard
from ..core.modifications import BoardModification
from .simple import (
    box_line_reduction,
    hidden_pairs,
    hidden_quads,
    hidden_singles,
    hidden_triples,
    naked_pairs,
    naked_quads,
    naked_singles,
    naked_triples,
    pointing_pairs_pointing_triples,
    prune_candidates,
)
from .tough import fish, simple_coloring_rule_2, simple_coloring_rule_4, swordfish, x_wing, xyz_wing, y_wing
from .diabolical import (
    jellyfish,
    medusa_rule_1,
    medusa_rule_2,
    medusa_rule_3,
    medusa_rule_4,
    medusa_rule_5,
    medusa_rule_6,
    x_cycles_rule_1,
    x_cycles_rule_2,
    x_cycles_rule_3,
    xy_chains,
)
from .extreme import (
    alternating_inference_chains_rule_1,
    alternating_inference_chains_rule_2,
    alternating_inference_chains_rule_3,
    grouped_x_cycles_rule_1,
    grouped_x_cycles_rule_2,
    grouped_x_cycles_rule_3,
)

Strategy = Callable[[CellBoard], Sequence[BoardModification]]

DEFAULT_STRATEGIES: List[Strategy] = [
    prune_candidates,
    naked_singles,
    hidden_singles,
    naked_pairs,
    naked_triples,
    hidden_pairs,
    hidden_triples,
    naked_quads,
    hidden_quads,
    pointing_pairs_pointing_triples,
    box_line_reduction,
    x_wing,
    simple_coloring_rule_2,
    simple_coloring_rule_4,
    y_wing,
    swordfish,
    xyz_wing,
    x_cycles_rule_1,
    x_cycles_rule_2,
    x_cycles_rule_3,
    xy_chains,
    medusa_rule_1,
    medusa_rule_2,
    medusa_rule_3,
    medusa_rule_4,
    medusa_rule_5,
    medusa_rule_6,
    jellyfish,
    grouped_x_cycles_rule_1,
    grouped_x_cycles_rule_2,
    grouped_x_cycles_rule_3,
    alternating_inference_chains_rule_1,
    alternating_inference_chains_rule_2,
    alternating_inference_chains_rule_3,
]

STRATEGIES_BY_NAME: Dict[str, Strategy] = {strategy.__name__: strategy for strategy in DEFAULT_STRATEGIES}


def select_strategies(include: Sequence[str] = (), exclude: Sequence[str] = ()) -> List[Strategy]:
    """
    Pick strategies by name, keeping the default order.

    Raises:
        KeyError: for a name that is not a known strategy.
    """
    for name in list(include) + list(exclude):
        if name not in STRATEGIES_BY_NAME:
            raise KeyError(f"Unknown strategy: {name}")
    wanted = set(include) if include else set(STRATEGIES_BY_NAME)
    return [
        strategy for strategy in DEFAULT_STRATEGIES
        if strategy.__name__ in wanted and strategy.__name__ not in exclude
    ]


__all__ = [
    "Strategy",
    "DEFAULT_STRATEGIES",
    "STRATEGIES_BY_NAME",
    "select_strategies",
    "fish",
] + list(STRATEGIES_BY_NAME)
