from dataclasses import dataclass

import numpy as np

from casino.slot_machine.ArmSet import ArmSet


@dataclass(frozen=True)
class NaiveRandom:
    name = "naive-random"
    params = ()

    def choose_action(self, arms: ArmSet, rng: np.random.Generator) -> int:
        # Ignores everything learned so far
        action_ = rng.integers(0, len(arms))
        return int(action_)

    def __str__(self) -> str:
        return "Naive Random"
