"""
Tests for SimulationConfig validation.
"""

import pytest

from casino.SimulationConfig import SimulationConfig
from strategy.EpsilonDecay import EpsilonDecay
from strategy.Oracle import Oracle
from utils.utils import ConfigurationError


class TestSimulationConfig:
    """Test SimulationConfig construction."""

    def test_valid(self):
        config = SimulationConfig(probs=[0.1, 0.9], round_nb=10, strategy=Oracle(), seed=3)

        assert config.probs == (0.1, 0.9)
        assert config.arm_nb == 2
        assert config.round_nb == 10
        assert config.strategy == Oracle()

    def test_frozen(self):
        config = SimulationConfig(probs=[0.5], round_nb=1, strategy=Oracle())

        with pytest.raises(AttributeError):
            config.round_nb = 5

    @pytest.mark.parametrize("round_nb", [0, -3, 2.5, "10", True, float("inf"), float("-inf"), float("nan")])
    def test_invalid_round_nb(self, round_nb):
        with pytest.raises(ConfigurationError):
            SimulationConfig(probs=[0.5], round_nb=round_nb, strategy=Oracle())

    @pytest.mark.parametrize("probs", [[], [0.5, 1.2], [-0.01], "0.5", 0.5, [float("nan")]])
    def test_invalid_probs(self, probs):
        with pytest.raises(ConfigurationError):
            SimulationConfig(probs=probs, round_nb=1, strategy=Oracle())

    def test_invalid_strategy(self):
        with pytest.raises(ConfigurationError):
            SimulationConfig(probs=[0.5], round_nb=1, strategy="oracle")
        with pytest.raises(ConfigurationError):
            SimulationConfig(probs=[0.5], round_nb=1, strategy=EpsilonDecay(0.5, -1.0))

    @pytest.mark.parametrize("seed", [-1, 1.5, float("inf"), float("nan"), "3"])
    def test_invalid_seed(self, seed):
        with pytest.raises(ConfigurationError):
            SimulationConfig(probs=[0.5], round_nb=1, strategy=Oracle(), seed=seed)

    def test_integral_float_round_nb(self):
        config = SimulationConfig(probs=[0.5], round_nb=10.0, strategy=Oracle(), seed=2.0)

        assert config.round_nb == 10 and type(config.round_nb) is int
        assert config.seed == 2 and type(config.seed) is int


class TestFromDict:
    """Test SimulationConfig.from_dict."""

    def test_from_name(self):
        config = SimulationConfig.from_dict({
            "probs": [0.1] * 10, "arm_nb": 10, "round_nb": 100,
            "strategy": "epsilon-decay", "params": {"epsilon": 0.3, "alpha": 0.01}, "seed": 0,
        })

        assert config.strategy == EpsilonDecay(0.3, 0.01)
        assert config.seed == 0

    @pytest.mark.parametrize("arm_nb", [0, float("inf"), float("nan"), 1.5, "1"])
    def test_invalid_arm_nb(self, arm_nb):
        with pytest.raises(ConfigurationError):
            SimulationConfig.from_dict({"probs": [0.5], "arm_nb": arm_nb, "round_nb": 1, "strategy": "oracle"})

    def test_arm_nb_mismatch(self):
        with pytest.raises(ConfigurationError):
            SimulationConfig.from_dict({"probs": [0.1] * 9, "arm_nb": 10, "round_nb": 1, "strategy": "oracle"})

    @pytest.mark.parametrize("missing", ["probs", "round_nb", "strategy"])
    def test_missing_key(self, missing):
        env_config = {"probs": [0.5], "round_nb": 1, "strategy": "oracle"}
        del env_config[missing]

        with pytest.raises(ConfigurationError):
            SimulationConfig.from_dict(env_config)

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError):
            SimulationConfig.from_dict({"probs": [0.5], "round_nb": 1, "strategy": "oracle", "rounds": 3})

    def test_params_with_strategy_value(self):
        with pytest.raises(ConfigurationError):
            SimulationConfig.from_dict({"probs": [0.5], "round_nb": 1, "strategy": Oracle(),
                                        "params": {"epsilon": 0.1}})

    def test_missing_strategy_param(self):
        with pytest.raises(ConfigurationError):
            SimulationConfig.from_dict({"probs": [0.5], "round_nb": 1, "strategy": "epsilon-greedy"})
