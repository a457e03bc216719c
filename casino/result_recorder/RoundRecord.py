from dataclasses import dataclass

ESTIMATE_DECIMALS = 5


@dataclass(frozen=True)
class RoundRecord:
    """
    What the casino emits after each round.

    round: 1-based number of the round
    arm: index of the arm played
    win: outcome of the trial
    estimates: estimated probability of every arm, taken before the trial
    regret: cumulative regret after the trial
    """
    round: int
    arm: int
    win: bool
    estimates: tuple[float, ...]
    regret: float

    def to_row(self) -> list[str]:
        return [f"{estimate:.{ESTIMATE_DECIMALS}f}" for estimate in self.estimates] + [str(float(self.regret))]


def csv_header(arm_nb: int) -> list[str]:
    return [f"arm_prob_{i}" for i in range(1, arm_nb + 1)] + ["regret"]
