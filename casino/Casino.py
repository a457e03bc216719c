import logging
from typing import Iterator, Optional, Union

import numpy as np
from tqdm import tqdm

from casino.Regret import cumulative_regret
from casino.SimulationConfig import SimulationConfig
from casino.result_recorder.AbstractResultRecorder import AbstractResultRecorder
from casino.result_recorder.RoundRecord import RoundRecord
from casino.result_recorder.RunHistory import RunHistory
from casino.slot_machine.ArmSet import ArmSet
from strategy.Strategy import select_arm
from utils.utils import ConfigurationError, InvariantViolation, func_timer, make_rng


class Casino:
    def __init__(self, config: SimulationConfig, rng: Union[np.random.Generator, int, None]=None,
                 progress: bool=False) -> None:
        """
        Runs one simulation: owns the config, the arms and the random source.

        :param config: A validated SimulationConfig
        :param rng: Random source (or seed). Falls back to config.seed
        :param progress: Show a tqdm progress bar on stderr
        """
        self.config = config
        self.strategy = config.strategy
        self.round_nb = config.round_nb
        self.arms = ArmSet(config.probs)
        self.rng = make_rng(rng if rng is not None else config.seed)
        self.progress = progress
        self._started = False

    def regret(self) -> float:
        return cumulative_regret(self.arms)

    def step(self, round_no: int) -> RoundRecord:
        # Snapshot before anything is drawn
        estimates = tuple(self.arms.get_prob_ests())
        action = select_arm(self.strategy, self.arms, self.rng)
        win = self.arms.play(action, self.rng)
        regret = self.regret()

        logging.debug(f"Round {round_no}: arm {action} {'won' if win else 'lost'}, regret {regret}")
        return RoundRecord(round=round_no, arm=action, win=win, estimates=estimates, regret=regret)

    def rounds(self) -> Iterator[RoundRecord]:
        """
        Play exactly round_nb rounds, yielding the record of each one.

        A casino can only be run once; its arms keep the state of the finished run.
        """
        if self._started:
            raise InvariantViolation("casino", "a simulation can only be run once")
        self._started = True

        logging.info(f"Starting {self.strategy} on {len(self.arms)} arms "
                     f"(probs: {list(self.config.probs)}) for {self.round_nb} rounds")

        for round_no in tqdm(range(1, self.round_nb + 1), disable=not self.progress, desc=str(self.strategy)):
            yield self.step(round_no)

        self.arms.check_counters()
        logging.info(f"Finished {self.strategy}: total regret {self.regret()}")

    @func_timer
    def play(self, recorder: Optional[AbstractResultRecorder]=None) -> AbstractResultRecorder:
        if recorder is None:
            recorder = RunHistory(agent_name=str(self.strategy), arm_nb=len(self.arms))
        elif not recorder.accepts(len(self.arms)):
            raise ConfigurationError("recorder arm count", recorder.arm_nb, f"expected {len(self.arms)}")
        for record in self.rounds():
            recorder.update(record)
        return recorder

    def display(self, recorder: RunHistory) -> str:
        return recorder.format_report(self.arms)


def run_casino_with_params(probs, round_nb: int, strategy: str, params: Optional[dict]=None,
                           seed: Optional[int]=None) -> tuple[Casino, RunHistory]:
    """
    Validate, build and run a casino in one call.
    """
    config = SimulationConfig.from_dict(
        {"probs": probs, "round_nb": round_nb, "strategy": strategy, "params": params, "seed": seed})
    casino = Casino(config)
    history = casino.play()
    return casino, history
