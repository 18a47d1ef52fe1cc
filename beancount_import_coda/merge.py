#!/usr/bin/env python3
"""Fold continuation chains of physical records into logical entities."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from beancount_import_coda.communications import (
    Communication,
    parse_information_communication,
    parse_movement_communication,
)
from beancount_import_coda.errors import TruncatedContinuationChain
from beancount_import_coda.models import FreeCommunication, Information, Movement
from beancount_import_coda.records import ChainRecord, FreeCommunicationRecord
from beancount_import_coda.stream import normalize_whitespace

logger = logging.getLogger(__name__)


def is_article_root(record: ChainRecord) -> bool:
    return record.article_code == "1"


def collect_chains(
    records: Sequence[ChainRecord],
    is_root: Callable[[ChainRecord], bool] = is_article_root,
) -> list[list[ChainRecord]]:
    """Group `records` into chains, in the order of each chain's first record.

    A root absorbs the records following it for as long as the last absorbed
    record says it continues. Records that are neither a root nor absorbed
    form a chain of their own.
    """
    chains = []
    consumed: set[int] = set()
    for i, record in enumerate(records):
        if i in consumed:
            continue
        chain = [record]
        if is_root(record):
            j = i
            while chain[-1].continues:
                j += 1
                if j >= len(records):
                    logger.warning(
                        f"{TruncatedContinuationChain.__name__}: input ended inside "
                        f"the chain of {type(record).__name__} "
                        f"{record.sequence}/{record.detail_sequence}, keeping "
                        f"{len(chain)} record(s)"
                    )
                    break
                consumed.add(j)
                chain.append(records[j])
        logger.debug(
            f"Assembled {type(record).__name__} chain {record.sequence}/"
            f"{record.detail_sequence} of {len(chain)} record(s)"
        )
        chains.append(chain)
    return chains


def resolve_communication(
    buffer: str,
    communication_type: str | None,
    decode: Callable[[str, str], Communication],
) -> Communication:
    if communication_type == "structured":
        return decode(buffer, communication_type)
    return normalize_whitespace(buffer)


def fold_movement(chain: Sequence[ChainRecord]) -> Movement:
    root = chain[0]
    movement = Movement(
        article_code=root.article_code,
        sequence=root.sequence,
        detail_sequence=root.detail_sequence,
    )
    for record in chain:
        for name, value in record.carried_fields().items():
            setattr(movement, name, value)
    movement.communication = resolve_communication(
        "".join(record.communication for record in chain),
        movement.communication_type,
        parse_movement_communication,
    )
    return movement


def fold_information(chain: Sequence[ChainRecord]) -> Information:
    root = chain[0]
    information = Information(
        article_code=root.article_code,
        sequence=root.sequence,
        detail_sequence=root.detail_sequence,
    )
    for record in chain:
        for name, value in record.carried_fields().items():
            setattr(information, name, value)
    information.communication = resolve_communication(
        "".join(record.communication for record in chain),
        information.communication_type,
        parse_information_communication,
    )
    return information


def fold_free_communication(chain: Sequence[ChainRecord]) -> FreeCommunication:
    root = chain[0]
    return FreeCommunication(
        sequence=root.sequence,
        detail_sequence=root.detail_sequence,
        text=normalize_whitespace("".join(record.communication for record in chain)),
    )


def merge_movements(records: Sequence[ChainRecord]) -> list[Movement]:
    return [fold_movement(chain) for chain in collect_chains(records)]


def merge_information(records: Sequence[ChainRecord]) -> list[Information]:
    return [fold_information(chain) for chain in collect_chains(records)]


def merge_free_communications(
    records: Sequence[FreeCommunicationRecord],
) -> list[FreeCommunication]:
    chains = collect_chains(records, is_root=lambda record: True)
    return [fold_free_communication(chain) for chain in chains]
