"""Nested-list packet comparator.

Packets are integers or (possibly nested) lists of packets, one per line in
JSON notation. Consecutive packets form pairs; blank lines between pairs
are ignored.
"""

import functools
import json
import logging
from typing import Any, Iterable, List, Sequence, Union

from .errors import MalformedPacketError

logger = logging.getLogger(__name__)

Packet = Union[int, List[Any]]

DIVIDER_PACKETS = ([[2]], [[6]])


def _is_packet(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, list):
        return all(_is_packet(item) for item in value)
    return False


def parse_packets(lines: Iterable[str]) -> List[Packet]:
    """Parse every non-blank line as a packet.

    Raises:
        MalformedPacketError: If a line is not an int or a nested list of ints
    """
    packets = []
    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        try:
            value = json.loads(line)
        except json.JSONDecodeError as e:
            raise MalformedPacketError(line_number, line) from e
        if not _is_packet(value):
            raise MalformedPacketError(line_number, line)
        packets.append(value)
    return packets


def compare_packets(left: Packet, right: Packet) -> int:
    """Three-way comparison of two packets.

    Returns:
        -1 if left sorts first, 1 if right sorts first, 0 if equal
    """
    if isinstance(left, int) and isinstance(right, int):
        return (left > right) - (left < right)
    if isinstance(left, int):
        return compare_packets([left], right)
    if isinstance(right, int):
        return compare_packets(left, [right])

    for l_item, r_item in zip(left, right):
        result = compare_packets(l_item, r_item)
        if result != 0:
            return result

    # Common prefix is equal; the shorter list comes first
    return (len(left) > len(right)) - (len(left) < len(right))


def ordered_pair_index_sum(packets: Sequence[Packet]) -> int:
    """Sum the 1-based indices of pairs that are already in order.

    A trailing packet without a partner is ignored.
    """
    total = 0
    for index, start in enumerate(range(0, len(packets) - 1, 2), start=1):
        if compare_packets(packets[start], packets[start + 1]) < 0:
            total += index
    return total


def decoder_key(packets: Sequence[Packet],
                dividers: Sequence[Packet] = DIVIDER_PACKETS) -> int:
    """Sort packets together with the dividers and multiply divider positions."""
    tagged = [(packet, False) for packet in packets]
    tagged.extend((divider, True) for divider in dividers)

    ordered = sorted(tagged, key=functools.cmp_to_key(lambda a, b: compare_packets(a[0], b[0])))

    key = 1
    for position, (packet, is_divider) in enumerate(ordered, start=1):
        if is_divider:
            logger.debug("Divider %s at position %d", json.dumps(packet), position)
            key *= position
    return key
