"""
Tests for round records and the run history recorder.
"""

import io

import pytest

from casino.result_recorder.RoundRecord import RoundRecord, csv_header
from casino.result_recorder.AbstractResultRecorder import AbstractResultRecorder
from casino.result_recorder.RunHistory import RunHistory
from casino.slot_machine.ArmSet import ArmSet


def make_record(round_no, arm, win, regret):
    return RoundRecord(round=round_no, arm=arm, win=win, estimates=(0.5, 1 / 3), regret=regret)


class TestRoundRecord:

    def test_row_precision(self):
        assert make_record(1, 0, True, 0.25).to_row() == ["0.50000", "0.33333", "0.25"]

    def test_header(self):
        assert csv_header(3) == ["arm_prob_1", "arm_prob_2", "arm_prob_3", "regret"]


class TestRunHistory:
    """Test RunHistory recorder."""

    def test_update_and_summary(self):
        history = RunHistory(agent_name="Oracle", arm_nb=2)
        history.update(make_record(1, 1, True, -0.1))
        history.update(make_record(2, 1, False, 0.8))
        history.update(make_record(3, 0, False, 1.7))

        assert history.get_summary() == {
            "agent_name": "Oracle",
            "nb_rounds": 3,
            "regret": 1.7,
            "selections": [1, 2],
            "wins": [0, 1],
        }
        assert history.get_actions() == [1, 1, 0]
        assert history.get_regrets() == [-0.1, 0.8, 1.7]

    def test_stream(self):
        stream = io.StringIO()
        history = RunHistory(agent_name="Oracle", arm_nb=2, stream=stream, keep_records=False)
        history.update(make_record(1, 0, True, 0.5))

        assert stream.getvalue() == "arm_prob_1,arm_prob_2,regret\n0.50000,0.33333,0.5\n"
        assert history.records == []
        assert history.nb_rounds == 1

    def test_export_to_csv(self, tmp_path):
        history = RunHistory(agent_name="Oracle", arm_nb=2)
        history.update(make_record(1, 0, True, 0.5))
        history.update(make_record(2, 0, True, 1.0))
        path = tmp_path / "run.csv"

        history.export_to_csv(str(path))

        assert path.read_text().splitlines() == [
            "arm_prob_1,arm_prob_2,regret",
            "0.50000,0.33333,0.5",
            "0.50000,0.33333,1.0",
        ]

    def test_arm_nb_is_required(self):
        with pytest.raises(TypeError):
            RunHistory(agent_name="Oracle")

    def test_accepts(self):
        history = RunHistory(agent_name="Oracle", arm_nb=2)

        assert isinstance(history, AbstractResultRecorder)
        assert history.accepts(2)
        assert not history.accepts(3)

    def test_report_precision(self, rng):
        arms = ArmSet([0.12345, 1 / 3])
        arms.play(1, rng)
        history = RunHistory(agent_name="Oracle", arm_nb=2)

        lines = history.format_report(arms).splitlines()

        assert lines[2] == "Arm #1\t0\t0\t0.123\t0.500"
        assert lines[3].startswith("Arm #2\t1\t")
        assert lines[3].split("\t")[3] == "0.333"
