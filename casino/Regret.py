from casino.slot_machine.ArmSet import ArmSet


def cumulative_regret(arms: ArmSet) -> float:
    """
    Expected reward given up by not always playing the best arm.

    Recomputed from the whole arm set on every call rather than accumulated, and kept as a
    float: ideal = max(prob_real) * total plays, actual = total wins.
    """
    ideal = arms.get_max_prob_real() * float(arms.get_total_plays())
    actual = float(arms.get_total_wins())
    return ideal - actual
