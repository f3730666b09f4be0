"""
Main entry point for wheelspin.

    wheelspin                      # run the desktop simulator
    wheelspin --debug run
    wheelspin export-svg styles wheel.svg
    wheelspin spin games --seed 7  # spin once, print the result
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from wheelspin.app import Board
from wheelspin.config import Settings, get_settings
from wheelspin.render import SvgRenderTarget
from wheelspin.text import FixedWidthMeasurer, PillowTextMeasurer
from wheelspin.wheel import SPIN_DURATION_MS, render_wheel

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False, log_file: Path | None = None) -> None:
    """Configure logging, optionally also to a file truncated on each run."""
    level = logging.DEBUG if debug else logging.INFO
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,
    )

    # Per-frame spin logging is noisy
    logging.getLogger("wheelspin.core.events").setLevel(logging.INFO)

    if log_file is not None:
        logging.info(f"Logging to file: {log_file}")


async def run_simulator(settings: Settings) -> None:
    """Run the desktop simulator."""
    from wheelspin.simulator import SimulatorWindow, WindowConfig

    board = Board(settings)
    window = SimulatorWindow(board, WindowConfig.from_settings(settings))
    await window.run()


def cmd_run(args: argparse.Namespace, settings: Settings) -> int:
    setup_logging(args.debug or settings.debug, settings.simulator.log_file)
    logger.info("wheelspin starting...")

    try:
        asyncio.run(run_simulator(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        return 1

    logger.info("wheelspin stopped")
    return 0


def cmd_export_svg(args: argparse.Namespace, settings: Settings) -> int:
    setup_logging(args.debug or settings.debug)

    board = Board(settings)
    store = board.stores.get(args.wheel)
    if store is None:
        logger.error(f"Unknown wheel: {args.wheel} (have: {', '.join(board.stores)})")
        return 1

    measure = FixedWidthMeasurer() if args.fixed_width else PillowTextMeasurer()
    target = SvgRenderTarget(settings.wheel.size, settings.wheel.size)
    target.draw(render_wheel(store.wheel, measure, settings.wheel))
    target.set_rotation(store.wheel.rotation)

    try:
        Path(args.output).write_text(target.to_svg(), encoding="utf-8")
    except OSError as e:
        logger.error(f"Failed to write {args.output}: {e}")
        return 1

    logger.info(f"Wrote {store.wheel.count} sectors to {args.output}")
    return 0


def cmd_spin(args: argparse.Namespace, settings: Settings) -> int:
    """Spin a wheel headless by driving the board with a simulated clock."""
    setup_logging(args.debug or settings.debug)
    if args.seed is not None:
        settings = settings.model_copy(update={"seed": args.seed})

    now_ms = 0.0
    board = Board(settings, clock=lambda: now_ms)
    spinner = board.spinners.get(args.wheel)
    if spinner is None:
        logger.error(f"Unknown wheel: {args.wheel}")
        return 1

    if not spinner.request_spin(now_ms):
        logger.error(f"Wheel {args.wheel} cannot spin (no items?)")
        return 1

    frame = 0
    while spinner.is_spinning:
        now_ms = min(now_ms + 1000 / 60, SPIN_DURATION_MS)
        frame += 1
        board.update(now_ms, frame)

    print(board.stores[args.wheel].wheel.result)
    return 0


def main() -> int:
    """Main entry point."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Wheel of choices",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    p_run = subparsers.add_parser("run", help="Run the desktop simulator")
    p_run.set_defaults(func=cmd_run)

    p_svg = subparsers.add_parser("export-svg", help="Write a wheel as SVG")
    p_svg.add_argument("wheel", help="Wheel name (e.g. styles)")
    p_svg.add_argument("output", help="Output .svg path")
    p_svg.add_argument("--fixed-width", action="store_true", help="Measure labels without font files")
    p_svg.set_defaults(func=cmd_export_svg)

    p_spin = subparsers.add_parser("spin", help="Spin a wheel once and print the result")
    p_spin.add_argument("wheel", help="Wheel name (e.g. games)")
    p_spin.add_argument("--seed", type=int, default=None, help="RNG seed")
    p_spin.set_defaults(func=cmd_spin)

    args = parser.parse_args()
    settings = get_settings()

    if not args.command:
        return cmd_run(args, settings)

    return args.func(args, settings)


if __name__ == "__main__":
    sys.exit(main())
