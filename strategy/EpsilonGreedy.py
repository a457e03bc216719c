import logging
from dataclasses import dataclass

import numpy as np

from casino.slot_machine.ArmSet import ArmSet
from utils.utils import first_argmax


def epsilon_greedy_action(arms: ArmSet, rng: np.random.Generator, epsilon: float) -> int:
    """
    Explore with probability epsilon, otherwise exploit the best estimate.

    The explore/exploit draw is always consumed, even when epsilon is 0, so the random stream
    stays aligned whatever the rate. Exploitation ties go to the lowest index.

    :param arms: The arm set, only read
    :param rng: Random source
    :param epsilon: Exploration rate in [0, 1]
    :return: Index of the arm to play
    """
    if rng.random() <= epsilon:
        action = int(rng.integers(0, len(arms)))
        logging.debug(f"Exploring arm {action} (epsilon={epsilon})")
    else:
        action = first_argmax(arms.get_prob_ests())

    return action


@dataclass(frozen=True)
class EpsilonGreedy:
    epsilon: float
    name = "epsilon-greedy"
    params = ("epsilon",)

    def choose_action(self, arms: ArmSet, rng: np.random.Generator) -> int:
        return epsilon_greedy_action(arms, rng, self.epsilon)

    def __str__(self) -> str:
        return f"Epsilon Greedy, e = {self.epsilon}"
