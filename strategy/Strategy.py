"""
Strategy variants and their dispatch.

A strategy is one of a closed set of frozen value objects, each carrying only its own
parameters. ``select_arm`` is the single entry point the casino uses; it returns an arm
index and never touches the arms.
"""
import math
from typing import Mapping, Optional, Union

import numpy as np

from casino.slot_machine.ArmSet import ArmSet
from strategy.AdversarialWorst import AdversarialWorst
from strategy.ConstantFirst import ConstantFirst
from strategy.EpsilonDecay import EpsilonDecay
from strategy.EpsilonGreedy import EpsilonGreedy
from strategy.NaiveRandom import NaiveRandom
from strategy.Oracle import Oracle
from strategy.ThompsonSampling import ThompsonSampling
from utils.utils import ConfigurationError, check_probability, is_real_number

Strategy = Union[Oracle, EpsilonGreedy, EpsilonDecay, ThompsonSampling, NaiveRandom, ConstantFirst,
                 AdversarialWorst]

STRATEGIES: dict[str, type] = {
    variant.name: variant for variant in
    (Oracle, EpsilonGreedy, EpsilonDecay, ThompsonSampling, NaiveRandom, ConstantFirst, AdversarialWorst)
}

# Short names of the original command line
ALIASES = {
    "epsilon": "epsilon-greedy",
    "decay": "epsilon-decay",
    "naive": "naive-random",
    "constant": "constant-first",
}


def strategy_names() -> list[str]:
    return list(STRATEGIES)


def _check_alpha(value) -> float:
    if not is_real_number(value):
        raise ConfigurationError("alpha", value, "expected a real number")
    value = float(value)
    if not math.isfinite(value) or value < 0:
        raise ConfigurationError("alpha", value, "should be a finite number >= 0")
    return value


_CHECKS = {
    "epsilon": lambda value: check_probability("epsilon", value),
    "alpha": _check_alpha,
}


def build_strategy(name: str, params: Optional[Mapping[str, float]]=None) -> Strategy:
    """
    Build a validated strategy from its name and parameters.

    :param name: One of ``strategy_names()`` or an alias
    :param params: Parameters of the strategy, exactly the ones it declares
    :return: The strategy value
    """
    if not isinstance(name, str):
        raise ConfigurationError("strategy name", name, "expected a str")
    key = ALIASES.get(name, name)
    if key not in STRATEGIES:
        raise ConfigurationError("strategy name", name, f"should be one of {strategy_names()}")

    variant = STRATEGIES[key]
    params = dict(params) if params is not None else {}

    missing = [param for param in variant.params if params.get(param) is None]
    if missing:
        raise ConfigurationError(f"{key} parameters", params, f"missing {missing}")
    unexpected = [param for param, value in params.items() if param not in variant.params and value is not None]
    if unexpected:
        raise ConfigurationError(f"{key} parameters", params, f"unexpected {unexpected}")

    return variant(**{param: _CHECKS[param](params[param]) for param in variant.params})


def check_strategy(strategy) -> Strategy:
    """
    Re-validate a strategy value built by hand rather than through ``build_strategy``.
    """
    if type(strategy) not in STRATEGIES.values():
        raise ConfigurationError("strategy", strategy, f"should be one of {strategy_names()}")
    return build_strategy(strategy.name, {param: getattr(strategy, param) for param in strategy.params})


def select_arm(strategy: Strategy, arms: ArmSet, rng: np.random.Generator) -> int:
    action = strategy.choose_action(arms, rng)
    return arms.check_index(action)
