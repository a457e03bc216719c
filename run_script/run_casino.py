"""
Run one bandit simulation from the command line.

Usage: python -m run_script.run_casino 0.1 0.9 0.1 ... --rounds 1000 --strategy epsilon-greedy --epsilon 0.1

The per-round CSV stream goes to stdout (or --output), the summary report follows it when
--summary is given.
"""
import sys
import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

# Ensure project root is in sys.path so imports like `casino.*` and `strategy.*` work
# when running this script directly.
project_root = Path(__file__).resolve().parents[1]
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from casino.Casino import Casino
from casino.SimulationConfig import DEFAULT_ARM_NB, SimulationConfig
from casino.result_recorder.RunHistory import RunHistory
from strategy.Strategy import ALIASES, strategy_names
from utils.utils import ConfigurationError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Multi-armed bandit testbed')
    parser.add_argument('probs', type=float, nargs='+',
                        help='True win probability of every arm, in arm order')
    parser.add_argument('--rounds', type=int, required=True,
                        help='Number of rounds to play')
    parser.add_argument('--strategy', required=True, choices=strategy_names() + list(ALIASES),
                        help='Decision strategy')
    parser.add_argument('--epsilon', type=float, default=None,
                        help='Exploration rate (epsilon-greedy, epsilon-decay)')
    parser.add_argument('--alpha', type=float, default=None,
                        help='Decay rate (epsilon-decay)')
    parser.add_argument('--arm-nb', type=int, default=DEFAULT_ARM_NB,
                        help=f'Number of arms (default: {DEFAULT_ARM_NB})')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducibility')
    parser.add_argument('--output', default=None,
                        help='Write the CSV stream to this file instead of stdout')
    parser.add_argument('--summary', action='store_true',
                        help='Print the end-of-run report')
    parser.add_argument('--progress', action='store_true',
                        help='Show a progress bar on stderr')
    parser.add_argument('--log-file', default=None,
                        help='Log to this file (default: stderr)')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return parser


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    env_config = {
        "probs": args.probs,
        "arm_nb": args.arm_nb,
        "round_nb": args.rounds,
        "strategy": args.strategy,
        "params": {"epsilon": args.epsilon, "alpha": args.alpha},
        "seed": args.seed,
    }
    return SimulationConfig.from_dict(env_config)


def main(argv: Optional[Sequence[str]]=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(filename=args.log_file, level=getattr(logging, args.log_level))

    try:
        config = config_from_args(args)
    except ConfigurationError as e:
        logging.error(f"Invalid configuration: {e}")
        parser.exit(2, f"{parser.prog}: error: {e}\n")

    casino = Casino(config, progress=args.progress)

    if args.output is not None:
        with open(args.output, 'w', newline='') as f:
            history = casino.play(RunHistory(str(config.strategy), config.arm_nb, stream=f, keep_records=False))
    else:
        history = casino.play(RunHistory(str(config.strategy), config.arm_nb, stream=sys.stdout,
                                         keep_records=False))
        sys.stdout.flush()

    history.log()
    if args.summary:
        sys.stdout.write(casino.display(history))

    return 0


if __name__ == "__main__":
    sys.exit(main())
