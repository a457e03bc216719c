import math
from typing import Sequence, Union

import numpy as np

from casino.slot_machine.Arm import Arm
from utils.utils import ConfigurationError, InvariantViolation, is_real_number


class ArmSet:
    def __init__(self, probs: Sequence[float]) -> None:
        # Order is the identity of an arm, it never changes after this point
        if isinstance(probs, (str, bytes)) or not hasattr(probs, '__iter__'):
            raise ConfigurationError("probabilities", probs, "expected a sequence of real numbers")
        probs = list(probs)
        if len(probs) == 0:
            raise ConfigurationError("arm count", 0, "at least one arm is needed")

        self.arm_nb = len(probs)
        self.arms = tuple(Arm(prob, index=i) for i, prob in enumerate(probs))

    def __len__(self) -> int:
        return self.arm_nb

    def __getitem__(self, index: int) -> Arm:
        return self.arms[index]

    def __iter__(self):
        return iter(self.arms)

    def check_index(self, index: Union[int, np.integer]) -> int:
        if not is_real_number(index) or not math.isfinite(index) or int(index) != index \
                or not 0 <= index < self.arm_nb:
            raise InvariantViolation("arm selection", f"index {index!r} outside [0, {self.arm_nb})")
        return int(index)

    def play(self, index: Union[int, np.integer], rng: np.random.Generator) -> bool:
        return self.arms[self.check_index(index)].play(rng)

    def get_state(self) -> list[dict]:
        states = [arm.get_state() for arm in self.arms]
        return states

    def get_prob_ests(self) -> list[float]:
        return [arm.get_prob_est() for arm in self.arms]

    def get_prob_reals(self) -> list[float]:
        return [arm.get_prob_real() for arm in self.arms]

    def get_max_prob_real(self) -> float:
        return max(self.get_prob_reals())

    def get_total_plays(self) -> int:
        return sum(arm.plays for arm in self.arms)

    def get_total_wins(self) -> int:
        return sum(arm.wins for arm in self.arms)

    def check_counters(self) -> None:
        for arm in self.arms:
            arm.check_counters()
