"""
Run the living system from the command line and print the final generation.
"""
import argparse
import sys

from tqdm import tqdm

from lifeengine import World, load_config, setup_logging
from lifeengine.config import SimulationConfig
from lifeengine.evaluation import find_period, find_translation, population
from lifeengine.utils import available_patterns


def format_state(state):
    """Render a state as text, '#' for alive and '.' for dead."""
    return "\n".join("".join("#" if cell else "." for cell in row) for row in state)


def build_config(args):
    """
    Merge the optional config file with command-line overrides.

    Args:
        args: Parsed command-line arguments

    Returns:
        SimulationConfig
    """
    config = load_config(args.config) if args.config else SimulationConfig()
    if args.rows is not None:
        config.grid.rows = args.rows
    if args.cols is not None:
        config.grid.cols = args.cols
    if args.strict:
        config.grid.strict = True
    if args.pattern is not None:
        config.seed.pattern = args.pattern
    if args.density is not None:
        config.seed.density = args.density
    if args.seed is not None:
        config.seed.seed = args.seed
    if args.generations is not None:
        config.run.generations = args.generations
    if args.log_level is not None:
        config.run.log_level = args.log_level
    return config


def main(argv=None):
    parser = argparse.ArgumentParser(description='Run Conway\'s Game of Life on a toroidal grid')
    parser.add_argument('--config', type=str, default=None,
                        help='Path to a JSON config file')
    parser.add_argument('--rows', type=int, default=None)
    parser.add_argument('--cols', type=int, default=None)
    parser.add_argument('--pattern', type=str, default=None,
                        choices=available_patterns() + ['random'],
                        help='Initial pattern')
    parser.add_argument('--density', type=float, default=None,
                        help='Alive probability for the random pattern')
    parser.add_argument('--seed', type=int, default=None, help='Random seed')
    parser.add_argument('--generations', type=int, default=None)
    parser.add_argument('--strict', action='store_true',
                        help='Fail on dropped registrations instead of warning')
    parser.add_argument('--log-level', type=str, default=None)
    parser.add_argument('--log-file', type=str, default=None)
    args = parser.parse_args(argv)

    config = build_config(args)
    setup_logging(config.run.log_level, args.log_file)

    world = World.from_config(config)
    initial = world.living.next_array()
    history = [initial]

    for _ in tqdm(range(config.run.generations), desc="Simulating"):
        world.tick(config.run.time_step)
        history.append(world.living.next_array())

    final = history[-1]
    print("=" * 60)
    print(f"Grid: {config.grid.rows}x{config.grid.cols}  Pattern: {config.seed.pattern}")
    print(f"Generations: {config.run.generations}")
    print(f"Population: {population(initial)} -> {population(final)}")

    period = find_period(history[-32:])
    if period > 0:
        print(f"Period: {period}")
    for p in range(1, min(8, len(history) - 1) + 1):
        shift = find_translation(history[-1 - p], final)
        if shift is not None and shift != (0, 0):
            print(f"Moves by {shift} every {p} generations")
            break
    print("=" * 60)
    print(format_state(final))
    return 0


if __name__ == "__main__":
    sys.exit(main())
