import csv
import logging
from typing import Optional, TextIO, Union

from typing_extensions import override

from casino.result_recorder.AbstractResultRecorder import AbstractResultRecorder
from casino.result_recorder.RoundRecord import RoundRecord, csv_header
from casino.slot_machine.ArmSet import ArmSet

SUMMARY_DECIMALS = 3


class RunHistory(AbstractResultRecorder):
    def __init__(self, agent_name: Optional[str], arm_nb: int, stream: Optional[TextIO]=None,
                 keep_records: bool=True) -> None:
        """
        Collects the records of one run.

        :param agent_name: Label of the strategy, used in logs and the report
        :param arm_nb: Number of arms, sizes the CSV header and the per-arm counters
        :param stream: If given, every record is written to it as a CSV row as soon as it arrives
        :param keep_records: Keep the records in memory (needed for export_to_csv)
        """
        super().__init__(arm_nb)
        self.agent_name = agent_name
        self.keep_records = keep_records
        self.records: list[RoundRecord] = []
        self.selections = [0] * arm_nb
        self.wins = [0] * arm_nb
        self.nb_rounds = 0
        self.last_regret = 0.0

        self._writer = None
        if stream is not None:
            self._writer = csv.writer(stream, lineterminator="\n")
            self._writer.writerow(csv_header(arm_nb))

    @override
    def update(self, record: RoundRecord) -> None:
        if self.keep_records:
            self.records.append(record)
        self.selections[record.arm] += 1
        if record.win:
            self.wins[record.arm] += 1
        self.nb_rounds += 1
        self.last_regret = record.regret
        if self._writer is not None:
            self._writer.writerow(record.to_row())

    @override
    def get_summary(self) -> dict:
        output_dict = {
            "agent_name": self.agent_name,
            "nb_rounds": self.nb_rounds,
            "regret": self.last_regret,
            "selections": list(self.selections),
            "wins": list(self.wins),
        }
        return output_dict

    def get_regrets(self) -> list[float]:
        return [record.regret for record in self.records]

    def get_actions(self) -> list[int]:
        return [record.arm for record in self.records]

    def export_to_csv(self, path: Union[str, TextIO]) -> None:
        """
        Write the kept records, header first. Accepts a path or an open text stream.
        """
        if isinstance(path, str):
            with open(path, 'w', newline='') as f:
                self._write_rows(f)
        else:
            self._write_rows(path)

    def _write_rows(self, f: TextIO) -> None:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(csv_header(self.arm_nb))
        writer.writerows(record.to_row() for record in self.records)

    def format_report(self, arms: ArmSet) -> str:
        lines = [f"{self.agent_name} - {self.nb_rounds} Plays",
                 "Arm ID\tPlays\tWins\tP(real)\tP(est)"]
        for idx, arm in enumerate(arms):
            lines.append(f"Arm #{idx + 1}\t{arm.plays}\t{arm.wins}\t{arm.prob_real:.{SUMMARY_DECIMALS}f}\t"
                         f"{arm.prob_est:.{SUMMARY_DECIMALS}f}")
        lines.append(f"Total Regret: {self.last_regret}")
        return "\n".join(lines) + "\n"

    def log(self, display: bool=False) -> None:
        logging.info(f"Agent name:{self.agent_name}")
        logging.info(f"Rounds played: {self.nb_rounds}, selections per arm: {self.selections}")
        logging.info(f"Total regret: {self.last_regret}")
        if display:
            print(f"Agent name:{self.agent_name}")
            print(f"Total regret: {self.last_regret}")
