from dataclasses import dataclass

import numpy as np

from casino.slot_machine.ArmSet import ArmSet


@dataclass(frozen=True)
class ConstantFirst:
    name = "constant-first"
    params = ()

    def choose_action(self, arms: ArmSet, rng: np.random.Generator) -> int:
        return 0

    def __str__(self) -> str:
        return "Constant First"
