import argparse
import sys
import os
import logging

# Ensure project root is in path so we can import 'advent_engine' package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from advent_engine.core.errors import PuzzleError


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )


def build_parser() -> argparse.ArgumentParser:
    from advent_engine.algo.passwords import PASSWORD_RANGE

    parser = argparse.ArgumentParser(description="Advent Engine: crossed wires and secure container solvers")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Wires Command
    wires_parser = subparsers.add_parser("wires", help="Find the closest wire crossing")
    wires_parser.add_argument("input_file", nargs="?", default=None, help="File with two wire paths (default: stdin)")

    # Passwords Command
    pw_parser = subparsers.add_parser("passwords", help="Count valid passwords in a range")
    pw_parser.add_argument("--start", type=int, default=PASSWORD_RANGE[0], help="First candidate (inclusive)")
    pw_parser.add_argument("--end", type=int, default=PASSWORD_RANGE[1], help="Last candidate (inclusive)")
    pw_parser.add_argument("--vectorized", action="store_true", help="Use the numpy counter")

    # Render Command
    render_parser = subparsers.add_parser("render", help="Draw the wires and their crossings")
    render_parser.add_argument("input_file", nargs="?", default=None, help="File with two wire paths (default: stdin)")
    render_parser.add_argument("--out", type=str, help="Save a PNG of the solved wires")
    render_parser.add_argument("--visual", action="store_true", help="Show visualization")
    render_parser.add_argument("--record", action="store_true", help="Record video of the wires being drawn")
    render_parser.add_argument("--speed", type=int, default=200, help="Steps revealed per frame")
    render_parser.add_argument("--width", type=int, default=1280, help="Window / image width")
    render_parser.add_argument("--height", type=int, default=720, help="Window / image height")

    return parser


def run_wires(args, logger) -> int:
    from advent_engine.io.reader import load_wire_paths
    from advent_engine.algo.wires import CrossedWires

    paths = load_wire_paths(args.input_file)
    puzzle = CrossedWires(paths)
    for status in puzzle.run():
        logger.debug(status)

    for line in puzzle.report():
        print(line)
    return 0


def run_passwords(args, logger) -> int:
    from advent_engine.algo.passwords import SecureContainer

    logger.info(f"Counting passwords in {args.start}-{args.end}{' (vectorized)' if args.vectorized else ''}...")
    puzzle = SecureContainer(args.start, args.end, vectorized=args.vectorized)
    for status in puzzle.run():
        logger.debug(status)

    for line in puzzle.report():
        print(line)
    return 0


def run_render(args, logger) -> int:
    from advent_engine.io.reader import load_wire_paths
    from advent_engine.algo.wires import CrossedWires

    puzzle = CrossedWires(load_wire_paths(args.input_file))
    puzzle.run_all()
    logger.info(f"Solved: {len(puzzle.intersections)} crossings, distance {puzzle.part_one}, steps {puzzle.part_two}")

    # pygame is only needed from here on. Its import banner would land on stdout next to the answers
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    from advent_engine.viz.renderer import WireRenderer
    renderer = WireRenderer(puzzle, width=args.width, height=args.height, record=args.record, speed=args.speed)

    if args.out:
        logger.info(f"Saving image to {args.out}...")
        renderer.save_image(args.out)
        logger.info("Save complete.")

    if args.visual or args.record:
        if args.record:
            from advent_engine.viz.recorder import default_output
            os.makedirs("recordings", exist_ok=True)
            renderer.recorder.output_file = default_output("recordings")
            logger.info(f"Recording video to {renderer.recorder.output_file}")

        renderer.revealed = 0
        renderer.init_window()
        renderer.run_loop()

    for line in puzzle.report():
        print(line)
    return 0


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("advent_engine")

    if args.command is None:
        parser.print_help()
        return 0

    logger.debug(f"Running command: {args.command}")

    commands = {
        "wires": run_wires,
        "passwords": run_passwords,
        "render": run_render,
    }
    try:
        return commands[args.command](args, logger)
    except PuzzleError as e:
        logger.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
