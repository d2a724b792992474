#!/usr/bin/env python3

import argparse

from silly_animals.core.renderer import RendererConfig
from silly_animals.game.entities.bestiary import load_bestiary
from silly_animals.game.game import Game
from silly_animals.renderers.simple_renderer import SimpleRenderer
from silly_animals.renderers.terminal_renderer import TerminalRenderer


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Silly Animals Game - two teams of creatures fight it out",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                          # Play in the terminal
  python main.py --simple                 # Plain ASCII output
  python main.py --simple --demo          # Watch a scripted battle
  python main.py --bestiary my.yaml       # Use custom creatures
        """
    )
    parser.add_argument("--bestiary", help="Path to a bestiary YAML file")
    parser.add_argument("--simple", action="store_true", help="Use the plain ASCII renderer")
    parser.add_argument("--demo", action="store_true", help="Advance rounds automatically (ASCII renderer only)")
    parser.add_argument("--debug", action="store_true", help="Show debug messages in the log")
    parser.add_argument("--log-dir", default="logs", help="Directory for saved log files")
    parser.add_argument("--width", type=int, default=60, help="Scene width in columns")
    parser.add_argument("--height", type=int, default=20, help="Scene height in rows")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    config = RendererConfig(
        width=args.width,
        height=args.height,
        title="Silly Animals Game"
    )

    if args.simple:
        renderer = SimpleRenderer(config, demo_mode=args.demo)
    else:
        renderer = TerminalRenderer(config)

    bestiary = load_bestiary(args.bestiary)
    game = Game(renderer, bestiary=bestiary, enable_debug=args.debug, log_dir=args.log_dir)

    try:
        game.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user")
    except Exception as e:
        print(f"\n\nError: {e}")
        raise
    finally:
        print("\n\nThanks for playing!")


if __name__ == "__main__":
    main()
