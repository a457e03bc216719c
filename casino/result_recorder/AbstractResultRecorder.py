from abc import ABC, abstractmethod

from casino.result_recorder.RoundRecord import RoundRecord


class AbstractResultRecorder(ABC):
    """
    Receives the records a casino emits, one per round, in round order.
    """

    def __init__(self, arm_nb: int) -> None:
        self.arm_nb = arm_nb

    def accepts(self, arm_nb: int) -> bool:
        # A recorder sized for another arm set would fail in the middle of a run
        return self.arm_nb == arm_nb

    @abstractmethod
    def update(self, record: RoundRecord) -> None:
        """
        Take the record of the round that was just played
        :param record: the round record, estimates taken before the trial
        :return: None
        """
        raise NotImplementedError("Subclass of AbstractResultRecorder should implement update")

    @abstractmethod
    def get_summary(self) -> dict:
        """
        Summary of the rounds received so far
        :return: dict of counters and the last cumulative regret
        """
        raise NotImplementedError("Subclass of AbstractResultRecorder should implement get_summary")
