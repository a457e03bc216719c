from dataclasses import dataclass

import numpy as np

from casino.slot_machine.ArmSet import ArmSet
from utils.utils import first_argmax


@dataclass(frozen=True)
class Oracle:
    """
    Plays the arm with the highest true probability. Needs the ground truth, so it is only a
    best-case baseline.
    """
    name = "oracle"
    params = ()

    def choose_action(self, arms: ArmSet, rng: np.random.Generator) -> int:
        return first_argmax(arms.get_prob_reals())

    def __str__(self) -> str:
        return "Oracle"
