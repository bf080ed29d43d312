"""
Command line interface for josuushi.

Usage:
    josuushi 本 3              # さんぼん
    josuushi -k 歳 20          # ハタチ
    josuushi -j 日 1           # full JSON
    josuushi --list            # supported counters
"""

import argparse
import json
import logging
import sys
from typing import Optional

from josuushi import __version__, settings
from josuushi.counters import CounterCategory, read_counter, resolve_counter, supported_counters
from josuushi.digit_ending import DIGIT_ENDING_COUNTERS
from josuushi.errors import CounterError, UnsupportedCounter

logger = logging.getLogger(__name__)


def format_counter_list() -> str:
    """Format supported counters, one per line with category and class."""
    lines = []
    for counter in supported_counters():
        category = resolve_counter(counter)
        if category is CounterCategory.DIGIT_ENDING:
            entry = DIGIT_ENDING_COUNTERS[counter]
            lines.append(f"{counter}\t{entry.kana}\t{entry.counter_class.value}")
        else:
            lines.append(f"{counter}\t\t{category.value}")
    return '\n'.join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Read Japanese counter expressions (josuushi) in kana',
        prog='josuushi',
    )

    parser.add_argument(
        'counter',
        nargs='?',
        help='Counter suffix, e.g. 本, 歳, 日',
    )

    parser.add_argument(
        'value',
        nargs='?',
        help='Quantity to read',
    )

    parser.add_argument(
        '-k', '--katakana',
        action=argparse.BooleanOptionalAction,
        default=settings.KANA_SCRIPT == 'katakana',
        help='Print the reading in katakana (--no-katakana forces hiragana)',
    )

    parser.add_argument(
        '-j', '--json',
        action='store_true',
        help='Print the full reading as JSON',
    )

    parser.add_argument(
        '--list',
        action='store_true',
        help='List supported counters',
    )

    parser.add_argument(
        '-v', '--version',
        action='store_true',
        help='Show version information',
    )

    return parser


def main(args: Optional[list] = None) -> int:
    """Main CLI entry point."""
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    parser = build_parser()
    parsed = parser.parse_args(args)

    if parsed.version:
        print(f'josuushi {__version__}')
        return 0

    if parsed.list:
        print(format_counter_list())
        return 0

    if not parsed.counter or parsed.value is None:
        parser.print_help()
        return 1

    try:
        reading = read_counter(parsed.counter, parsed.value)
    except UnsupportedCounter as e:
        logger.warning("Unsupported counter requested: %s", e.counter)
        print(f'Error: {e}', file=sys.stderr)
        return 1
    except CounterError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    if parsed.json:
        print(json.dumps(reading.model_dump(), ensure_ascii=False))
    elif parsed.katakana:
        print(reading.katakana)
    else:
        print(reading.kana)

    return 0


if __name__ == '__main__':
    sys.exit(main())
