"""
Command-line interface for parsing and querying choice strings
"""
import argparse
import logging
import sys

from .api import parse, parse_raw
from .config import Config
from .errors import ConfigError, ParseFailure

logger = logging.getLogger(__name__)


def non_negative_int(value):
    """argparse type for numbers that can be selected (0 or more)"""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or more: {value!r}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(
        prog='choice-string',
        description="Parse a choice string ('all', 'none', or numbers and ranges such as '1-5, 8 10')",
    )
    parser.add_argument('text', nargs='?', default=None,
                        help="Choice string to parse (defaults to the configured selection)")
    parser.add_argument('--config', type=str, help='Path to the YAML configuration file')
    parser.add_argument('--raw', dest='normalize', action='store_const', const=False, default=None,
                        help='Print the elements as written, without merging ranges')
    parser.add_argument('--contains', type=non_negative_int, action='append', metavar='N',
                        help='Check whether N is selected (can be repeated)')
    parser.add_argument('--upper', type=non_negative_int, metavar='N',
                        help='List the selected numbers from 0 to N')
    parser.add_argument('--log-level', type=str, help='Logging level (e.g. DEBUG, INFO)')
    return parser


def resolve_log_level(config):
    """Return the configured logging level as a number.

    Accepts level names (any case) or numeric levels. Raises ``ConfigError``
    for anything else.
    """
    level = (config.get('logging') or {}).get('level', 'WARNING')
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if not isinstance(resolved, int):
        raise ConfigError(f"Unknown logging level: {level!r}")
    return resolved


def resolve_upper(config):
    """Return the configured ``upper`` bound, or ``None`` when unset."""
    upper = config.get('upper')
    if upper is None:
        return None
    if isinstance(upper, bool) or not isinstance(upper, int) or upper < 0:
        raise ConfigError(f"'upper' must be a number, 0 or more: {upper!r}")
    return upper


def setup_logging(config):
    log_config = config.get('logging') or {}
    logging.basicConfig(
        level=resolve_log_level(config),
        format=log_config.get('format', Config.DEFAULT_CONFIG['logging']['format']),
    )


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = Config(args.config)
        config.update_from_args({
            'selection': args.text,
            'normalize': args.normalize,
            'upper': args.upper,
        })
        if args.log_level:
            config.update_from_args({'logging': dict(config.get('logging') or {}, level=args.log_level)})
        upper = resolve_upper(config)
        setup_logging(config)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    text = str(config.get('selection') or '')
    parse_fn = parse if config.get('normalize', True) else parse_raw
    try:
        selection = parse_fn(text)
    except ParseFailure as e:
        print(f"Invalid selection {text!r}: {e.kind.value}", file=sys.stderr)
        return 2

    print(selection)
    for item in args.contains or []:
        print(f"{item}: {'yes' if selection.contains_item(item) else 'no'}")
    if upper is not None:
        logger.info("Listing members up to %s", upper)
        print(' '.join(str(n) for n in selection.members(upper)))
    return 0


if __name__ == '__main__':
    sys.exit(main())
