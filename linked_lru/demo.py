"""
Demonstration driver for LinkedListLRU.

Accesses a sequence of values and prints the cache order after each one.
With no values it replays the reference walk-through:

    capacity 3, seeded with 1, then access 2, 3, 4, 2
    -> 2 -> 1 / 3 -> 2 -> 1 / 4 -> 3 -> 2 / 2 -> 4 -> 3
"""

import argparse
import logging
import sys
from typing import Any, Iterable, List, Optional

from .caching.linked_list_lru import LinkedListLRU
from .config import settings

logger = logging.getLogger(__name__)

SCENARIO_INITIAL = 1
SCENARIO_CAPACITY = 3
SCENARIO_VALUES = [2, 3, 4, 2]

VALUE_TYPES = {"int": int, "str": str}
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def run_demo(cache: LinkedListLRU, values: Iterable[Any], separator: str) -> List[str]:
    """
    Access each value in turn, printing the order after every step.

    Returns:
        The rendered order after each access
    """
    print(f"start:     {cache.render(separator=separator)}")
    orders = []
    for value in values:
        cache.access(value)
        order = cache.render(separator=separator)
        orders.append(order)
        print(f"access({value}): {order}")

    stats = cache.get_stats()
    print(
        f"hits={stats.hits} misses={stats.misses} evictions={stats.evictions} "
        f"size={stats.size}/{cache.capacity} hit_rate={stats.hit_rate:.2f}"
    )
    return orders


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Walk a linked-list LRU cache through a series of accesses"
    )
    parser.add_argument("values", nargs="*", help="Values to access, in order")
    parser.add_argument("--initial", help="Seed value (default: first value given)")
    parser.add_argument(
        "--capacity",
        type=int,
        default=None,
        help=f"Cache capacity (default: {settings.default_capacity})"
    )
    parser.add_argument(
        "--type",
        dest="value_type",
        choices=sorted(VALUE_TYPES),
        default="int",
        help="How to interpret values (default: int)"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help=f"Logging level (default: {settings.log_level})"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=(args.log_level or settings.log_level).upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if not args.values and args.initial is None:
        logger.info("No values given, replaying the reference scenario")
        initial, capacity, values = SCENARIO_INITIAL, SCENARIO_CAPACITY, SCENARIO_VALUES
        if args.capacity is not None:
            capacity = args.capacity
    else:
        convert = VALUE_TYPES[args.value_type]
        try:
            values = [convert(v) for v in args.values]
            initial = convert(args.initial) if args.initial is not None else values.pop(0)
        except ValueError as e:
            parser.error(f"could not parse values as {args.value_type}: {e}")
        capacity = args.capacity if args.capacity is not None else settings.default_capacity

    try:
        cache = LinkedListLRU(initial, capacity=capacity)
    except ValueError as e:
        parser.error(str(e))

    logger.info(f"Running {settings.app_name} with capacity {capacity}")
    run_demo(cache, values, settings.separator)
    return 0


if __name__ == "__main__":
    sys.exit(main())
