from typing import Optional

import numpy as np

from utils.utils import InvariantViolation, check_probability

PRIOR_PROB_EST = 0.5


class Arm:
    def __init__(self, prob_real: float, index: Optional[int]=None) -> None:
        """
        A binary slot machine with a hidden win probability.

        :param prob_real: True win probability, fixed for the life of the arm
        :param index: Position of the arm in its set
        """
        self.id = index
        self._prob_real = check_probability(f"probability of arm {index}", prob_real)
        self._prob_est = PRIOR_PROB_EST
        self._plays = 0
        self._wins = 0

    @property
    def plays(self) -> int:
        return self._plays

    @property
    def wins(self) -> int:
        return self._wins

    @property
    def losses(self) -> int:
        return self._plays - self._wins

    @property
    def prob_real(self) -> float:
        return self._prob_real

    @property
    def prob_est(self) -> float:
        return self._prob_est

    def play(self, rng: np.random.Generator) -> bool:
        """
        Run one Bernoulli trial and update the estimate. This is the only place an arm changes.

        :param rng: Random source, one draw is consumed
        :return: True on a win
        """
        roll = rng.random()
        win = bool(roll <= self._prob_real)
        self._plays += 1
        if win:
            self._wins += 1

        self.check_counters()
        self._prob_est = self._wins / self._plays
        return win

    def check_counters(self) -> None:
        if self._plays < 0 or self._wins < 0:
            raise InvariantViolation(f"arm {self.id}", f"negative counters (plays={self._plays}, wins={self._wins})")
        if self._wins > self._plays:
            raise InvariantViolation(f"arm {self.id}", f"wins ({self._wins}) > plays ({self._plays})")

    def get_state(self) -> dict:
        state = {"played": self._plays, "wins": self._wins, "losses": self.losses,
                 "prob_est": self._prob_est}

        return state

    def get_prob_real(self) -> float:
        return self._prob_real

    def get_prob_est(self) -> float:
        return self._prob_est

    def __repr__(self) -> str:
        return f"Arm(id={self.id}, plays={self._plays}, wins={self._wins}, " \
               f"prob_real={self._prob_real}, prob_est={self._prob_est:.3f})"
