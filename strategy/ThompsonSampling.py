from dataclasses import dataclass

import numpy as np

from casino.slot_machine.ArmSet import ArmSet
from utils.utils import first_argmax


def sample_posteriors(arms: ArmSet, rng: np.random.Generator) -> np.ndarray:
    """
    One draw per arm, in index order, from Beta(wins + 1, losses + 1): the posterior of the
    win probability under a uniform prior.
    """
    states = arms.get_state()
    reward_times = np.array([state['wins'] for state in states])
    loss_times = np.array([state['losses'] for state in states])
    estimate_reward_dis = np.array(
        [rng.beta(reward_times[i] + 1, loss_times[i] + 1) for i in range(len(reward_times))])
    return estimate_reward_dis


@dataclass(frozen=True)
class ThompsonSampling:
    name = "thompson"
    params = ()

    def choose_action(self, arms: ArmSet, rng: np.random.Generator) -> int:
        # A later sample only wins if strictly larger
        return first_argmax(sample_posteriors(arms, rng))

    def __str__(self) -> str:
        return "Thompson Sampling"
