from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from strategy.Strategy import Strategy, build_strategy, check_strategy
from utils.utils import ConfigurationError, check_int, check_probability

DEFAULT_ARM_NB = 10


@dataclass(frozen=True)
class SimulationConfig:
    """
    Everything a run needs, validated once before the first round.

    probs: true win probability of every arm, in arm order
    round_nb: exact number of trials to run
    strategy: the strategy value (see strategy.Strategy)
    seed: optional seed of the random source
    """
    probs: tuple[float, ...]
    round_nb: int
    strategy: Strategy
    seed: Optional[int] = field(default=None)

    def __post_init__(self) -> None:
        if isinstance(self.probs, (str, bytes)) or not hasattr(self.probs, '__iter__'):
            raise ConfigurationError("probabilities", self.probs, "expected a sequence of real numbers")
        probs = tuple(check_probability(f"probability of arm {i}", prob) for i, prob in enumerate(self.probs))
        if len(probs) == 0:
            raise ConfigurationError("arm count", 0, "at least one arm is needed")
        object.__setattr__(self, "probs", probs)

        object.__setattr__(self, "round_nb", check_int("round count", self.round_nb, 1))

        object.__setattr__(self, "strategy", check_strategy(self.strategy))

        if self.seed is not None:
            object.__setattr__(self, "seed", check_int("seed", self.seed, 0))

    @property
    def arm_nb(self) -> int:
        return len(self.probs)

    @classmethod
    def from_dict(cls, env_config: Mapping[str, Any]) -> "SimulationConfig":
        """
        Build a config from a plain dict:
        {"probs": [...], "round_nb": 1000, "strategy": "epsilon-greedy", "params": {"epsilon": 0.1},
        "arm_nb": 10, "seed": 0}. "arm_nb" and "seed" are optional, "params" only for strategies
        that take some.
        """
        known_keys = {"probs", "round_nb", "strategy", "params", "arm_nb", "seed"}
        unknown = set(env_config) - known_keys
        if unknown:
            raise ConfigurationError("config keys", sorted(unknown), f"should be among {sorted(known_keys)}")
        for key in ("probs", "round_nb", "strategy"):
            if key not in env_config:
                raise ConfigurationError(key, None, "missing from the configuration")

        probs = env_config["probs"]
        arm_nb = env_config.get("arm_nb")
        if arm_nb is not None:
            arm_nb = check_int("arm count", arm_nb, 1)
            if not hasattr(probs, '__len__') or len(probs) != arm_nb:
                raise ConfigurationError("probabilities", probs, f"expected exactly {arm_nb} values")

        strategy = env_config["strategy"]
        if isinstance(strategy, str):
            strategy = build_strategy(strategy, env_config.get("params"))
        elif env_config.get("params"):
            raise ConfigurationError("params", env_config["params"], "only allowed with a strategy name")

        return cls(probs=probs, round_nb=env_config["round_nb"], strategy=strategy, seed=env_config.get("seed"))
