import logging
import sys
from typing import Iterable, Iterator, Optional, TextIO

from .core.config import Config, RANGE_START, RANGE_STOP, RESULT_LABEL
from .core.data_models import AccumulationStep, Sequence, SequenceSumResult

logger = logging.getLogger(__name__)


def build_sequence(start: int = RANGE_START, stop: int = RANGE_STOP) -> Sequence:
    """Fill a new list with the integers from start up to, not including, stop."""
    sequence = []
    for i in range(start, stop):
        sequence.append(i)
    return sequence


def accumulate(sequence: Iterable[int]) -> Iterator[AccumulationStep]:
    """
    Sum a sequence one element at a time.

    Args:
        sequence: Integers to add up, visited once in order

    Yields:
        An AccumulationStep after each element, carrying the running total
    """
    total = 0
    for index, value in enumerate(sequence):
        total += value
        logger.debug("step %d: +%d -> %d", index, value, total)
        yield AccumulationStep(index=index, value=value, running_total=total)


def sequence_sum(sequence: Optional[Iterable[int]] = None) -> SequenceSumResult:
    """Sum the given sequence, or the default 1..4 sequence when none is given."""
    if sequence is None:
        sequence = build_sequence()
    else:
        sequence = list(sequence)

    steps = list(accumulate(sequence))
    total = steps[-1].running_total if steps else 0

    return SequenceSumResult(sequence=sequence, total=total, steps=steps)


def format_result(total: int) -> str:
    return f"{RESULT_LABEL} {total}"


def run(stream: Optional[TextIO] = None, config: Optional[Config] = None) -> SequenceSumResult:
    """
    Build the sequence, sum it and print the result line.

    Every call starts from a freshly built sequence, so repeated runs write
    the same line.

    Args:
        stream: Where to write the result (default: stdout)
        config: Range and logging settings (default: the fixed 1..4 range)

    Returns:
        The SequenceSumResult that was printed
    """
    if stream is None:
        stream = sys.stdout
    if config is None:
        config = Config()

    sequence = build_sequence(config.range_start, config.range_stop)
    logger.info("Built sequence %s (%d elements)", sequence, len(sequence))

    result = sequence_sum(sequence)
    logger.info("Accumulated %d steps, total %d", len(result.steps), result.total)

    print(format_result(result.total), file=stream)
    return result
