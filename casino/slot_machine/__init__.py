"""Slot machines of the casino: single arms and the fixed set they are played from."""

from .Arm import Arm, PRIOR_PROB_EST
from .ArmSet import ArmSet

__all__ = ["Arm", "ArmSet", "PRIOR_PROB_EST"]
