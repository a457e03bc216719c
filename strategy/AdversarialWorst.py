from dataclasses import dataclass

import numpy as np

from casino.slot_machine.ArmSet import ArmSet
from utils.utils import first_argmin


@dataclass(frozen=True)
class AdversarialWorst:
    """
    Plays the arm with the lowest true probability, an upper bound on regret.
    """
    name = "adversarial-worst"
    params = ()

    def choose_action(self, arms: ArmSet, rng: np.random.Generator) -> int:
        return first_argmin(arms.get_prob_reals())

    def __str__(self) -> str:
        return "Adversarial Worst"
