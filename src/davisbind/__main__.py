import argparse
import logging
import sys
from typing import List, Optional

from .version import __version__
from .errors import ConfigFormatError, DecodeError
from .decoders import RainSensor, RainField
from .lgtv import LgtvBindingProvider


def setup_logging(verbosity: int) -> int:
    """Configure logging."""
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    return level


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="davisbind",
        description="Parse lgtv binding strings and decode Davis rain counters",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Increase logging verbosity"
    )
    parser.add_argument("--version", action="store_true", help="Show version and exit")

    lgtv = parser.add_argument_group("lgtv binding")
    lgtv.add_argument(
        "--binding",
        help="Binding string, e.g. 'ON:Livingroom:POWER, OFF:Livingroom:POWER'",
    )
    lgtv.add_argument(
        "--item-type", default="Switch", help="Item type the binding belongs to"
    )
    lgtv.add_argument("--item-name", default="Item", help="Item name used in messages")

    rain = parser.add_argument_group("rain decoder")
    rain.add_argument("--decode", metavar="HEX", help="Raw payload in hexadecimal")
    where = rain.add_mutually_exclusive_group()
    where.add_argument("--offset", type=int, help="Byte offset of the rain counter")
    where.add_argument(
        "--field",
        choices=[f.name for f in RainField],
        help="LOOP packet rain field to decode",
    )
    rain.add_argument(
        "--rain-click-base",
        type=float,
        help="Rain per click (defaults to the 0.2 mm collector)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger = logging.getLogger("davisbind")

    if args.version:
        print(f"davisbind {__version__}")
        return 0

    if not args.binding and not args.decode:
        parser.print_usage()
        return 1

    try:
        if args.binding:
            provider = LgtvBindingProvider()
            store = provider.process_binding_configuration(
                "cli", args.item_name, args.item_type, args.binding
            )
            print(f"{args.item_name} ({store.lookup_item_type().value}):")
            for command, target in store.device_commands().items():
                print(f"  {command} -> {target}")

        if args.decode:
            try:
                data = bytes.fromhex(args.decode)
            except ValueError as e:
                raise DecodeError(f"Invalid hex payload: {e}") from e

            sensor = RainSensor(logger, click_base=args.rain_click_base)
            if args.field:
                value = sensor.decode_field(data, RainField[args.field])
            else:
                value = sensor.decode(data, args.offset or 0)
            unit = sensor.config.unit_of_measurement
            print(f"{value:.2f} {unit}" if unit else f"{value:.2f}")
    except (ConfigFormatError, DecodeError) as e:
        logger.error(str(e))
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
