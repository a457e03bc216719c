import math
from dataclasses import dataclass

import numpy as np

from casino.slot_machine.ArmSet import ArmSet
from strategy.EpsilonGreedy import epsilon_greedy_action


@dataclass(frozen=True)
class EpsilonDecay:
    """
    Epsilon greedy whose exploration rate shrinks with the number of plays already made:
    epsilon_t = epsilon * exp(-alpha * t). Nothing is stored between rounds, t is read from
    the arm set.
    """
    epsilon: float
    alpha: float
    name = "epsilon-decay"
    params = ("epsilon", "alpha")

    def current_epsilon(self, total_plays: int) -> float:
        return self.epsilon * math.exp(-self.alpha * total_plays)

    def choose_action(self, arms: ArmSet, rng: np.random.Generator) -> int:
        epsilon_t = self.current_epsilon(arms.get_total_plays())
        return epsilon_greedy_action(arms, rng, epsilon_t)

    def __str__(self) -> str:
        return f"Epsilon Decay, e = {self.epsilon}, a = {self.alpha}"
