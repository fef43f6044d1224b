"""Command-line entry point: `lc3 image-file1 [image-file2 ...]`."""
import argparse
import logging
import sys

from .config import PC_START, MachineConfig
from .console import StdinInput
from .cpu_core import CPU
from .errors import ImageLoadError, UnknownTrap, UnsupportedOpcode
from .loader import load_images
from . import terminal

logger = logging.getLogger(__name__)


def _address(text: str) -> int:
    return int(text, 0) & 0xFFFF


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lc3", description="Run LC-3 program images.")
    parser.add_argument("images", nargs="+", metavar="image-file",
                        help="program image(s), loaded in order")
    parser.add_argument("--start", type=_address, default=PC_START,
                        help="initial PC (default 0x3000)")
    parser.add_argument("--strict-traps", action="store_true",
                        help="abort on an unknown trap vector instead of ignoring it")
    parser.add_argument("--gui", action="store_true",
                        help="run in the Qt viewer instead of the terminal")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="-v for info, -vv for debug logging")
    return parser


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, stream=sys.stderr,
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")


def execute(cpu: CPU) -> int:
    """Run a loaded machine to completion and map the outcome to an exit code."""
    try:
        cpu.run()
    except UnsupportedOpcode:
        print("ERROR: Unsupported opcode. Aborted.")
        return 1
    except UnknownTrap as e:
        print(f"ERROR: {e}. Aborted.")
        return 1
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    config = MachineConfig(start_address=args.start,
                           strict_traps=args.strict_traps)

    if args.gui:
        from viewer.main_window import run
        return run(args.images, config)

    fd = sys.stdin.fileno()
    cpu = CPU(StdinInput(fd), sys.stdout.buffer, config)
    try:
        load_images(cpu.mem, args.images)
    except ImageLoadError as e:
        logger.debug("%s", e)
        print(f"Failed to load image: {e.path}")
        return 1

    terminal.install_interrupt_handler(fd)
    with terminal.input_mode(fd):
        return execute(cpu)


if __name__ == "__main__":
    sys.exit(main())
