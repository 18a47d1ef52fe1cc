#!/usr/bin/env python3
"""Decode a whole CODA document.

    >>> document = parse(open("statement.cod", encoding="ISO-8859-1").read())
    >>> document.balance.new.balance
    Decimal('-500012.100')
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from beancount_import_coda.errors import UnknownRecordType
from beancount_import_coda.linker import link_information
from beancount_import_coda.merge import (
    merge_free_communications,
    merge_information,
    merge_movements,
)
from beancount_import_coda.models import Document
from beancount_import_coda.records import (
    INFORMATION_ARTICLES,
    MOVEMENT_ARTICLES,
    ChainRecord,
    FreeCommunicationRecord,
    fit_line,
    parse_article,
    parse_free_communication,
    parse_header,
    parse_new_balance,
    parse_old_balance,
    parse_trailer,
)

logger = logging.getLogger(__name__)

HEADER = "0"
OLD_BALANCE = "1"
MOVEMENT = "2"
INFORMATION = "3"
FREE_COMMUNICATION = "4"
NEW_BALANCE = "8"
TRAILER = "9"


@dataclass
class DecodeContext:
    """State carried between lines of one document."""

    account_structure: int | None = None
    movements: list[ChainRecord] = field(default_factory=list)
    information: list[ChainRecord] = field(default_factory=list)
    free_communications: list[FreeCommunicationRecord] = field(default_factory=list)


def decode_line(line: str, document: Document, context: DecodeContext) -> None:
    record_type = line[0]
    if record_type == HEADER:
        document.header = parse_header(line)
    elif record_type == OLD_BALANCE:
        document.balance.old = parse_old_balance(line)
        context.account_structure = document.balance.old.structure
    elif record_type == MOVEMENT:
        context.movements.append(parse_article(line, MOVEMENT_ARTICLES))
    elif record_type == INFORMATION:
        context.information.append(parse_article(line, INFORMATION_ARTICLES))
    elif record_type == FREE_COMMUNICATION:
        context.free_communications.append(parse_free_communication(line))
    elif record_type == NEW_BALANCE:
        document.balance.new = parse_new_balance(line, context.account_structure)
    elif record_type == TRAILER:
        document.trailer = parse_trailer(line)
    else:
        raise UnknownRecordType(line)


def parse(text: str) -> Document:
    document = Document()
    context = DecodeContext()
    for line in text.strip().splitlines():
        if not line.strip():
            continue
        decode_line(fit_line(line), document, context)

    document.movements = merge_movements(context.movements)
    document.information = link_information(
        document.movements, merge_information(context.information)
    )
    document.free_communications = merge_free_communications(
        context.free_communications
    )

    logger.info(
        f"Parsed CODA document with {len(document.movements)} movement(s), "
        f"{len(document.information)} unlinked information record(s) and "
        f"{len(document.free_communications)} free communication(s)"
    )
    return document
