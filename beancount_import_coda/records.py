#!/usr/bin/env python3
"""Fixed-width decoders, one per record type and article code.

Offsets are 0-indexed half-open slices of a 128 column line. Movement,
information and free communication lines decode to flat `*Record` objects
that still carry their `next_code`/`link_code` continuation flags; merging
them into entities happens in `merge`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import ClassVar

from beancount_import_coda.dates import parse_date
from beancount_import_coda.errors import UnknownCommunicationType, UnknownRecordType
from beancount_import_coda.models import (
    CommunicationType,
    Counterparty,
    Header,
    NewBalance,
    OldBalance,
    TransactionCode,
    Trailer,
    parse_account,
)
from beancount_import_coda.stream import FieldCursor, to_amount, to_decimal, to_int

logger = logging.getLogger(__name__)

LINE_WIDTH = 128
DUPLICATE = "D"
COMMUNICATION_TYPES: dict[str, CommunicationType] = {
    "0": "unstructured",
    "1": "structured",
}


def communication_type(flag: str) -> CommunicationType:
    if flag not in COMMUNICATION_TYPES:
        raise UnknownCommunicationType(flag)
    return COMMUNICATION_TYPES[flag]


@dataclass
class ChainRecord:
    """A physical line that may continue on the next line of its kind.

    `carried` lists the fields a continuation line contributes to the entity
    its chain is folded into.
    """

    article_code: ClassVar[str] = ""
    carried: ClassVar[tuple[str, ...]] = ()

    sequence: str
    detail_sequence: str
    communication: str
    next_code: str
    link_code: str

    @property
    def continues(self) -> bool:
        return self.next_code == "1"

    def carried_fields(self) -> dict:
        return {name: getattr(self, name) for name in self.carried}


@dataclass
class MovementRecord1(ChainRecord):
    article_code: ClassVar[str] = "1"
    carried: ClassVar[tuple[str, ...]] = (
        "reference_number",
        "amount",
        "value_date",
        "transaction_code",
        "communication_type",
        "entry_date",
        "sequence_number",
        "globalisation_code",
    )

    reference_number: str
    amount: Decimal
    value_date: date | None
    transaction_code: TransactionCode
    communication_type: CommunicationType
    entry_date: date | None
    sequence_number: str
    globalisation_code: str


@dataclass
class MovementRecord2(ChainRecord):
    article_code: ClassVar[str] = "2"
    carried: ClassVar[tuple[str, ...]] = (
        "customer_reference",
        "bic",
        "r_transaction_type",
        "r_reason",
        "category_purpose",
        "purpose",
    )

    customer_reference: str
    bic: str
    r_transaction_type: str
    r_reason: str
    category_purpose: str
    purpose: str


@dataclass
class MovementRecord3(ChainRecord):
    article_code: ClassVar[str] = "3"
    carried: ClassVar[tuple[str, ...]] = ("counterparty",)

    counterparty: Counterparty


@dataclass
class InformationRecord1(ChainRecord):
    article_code: ClassVar[str] = "1"
    carried: ClassVar[tuple[str, ...]] = (
        "reference_number",
        "transaction_code",
        "communication_type",
    )

    reference_number: str
    transaction_code: TransactionCode
    communication_type: CommunicationType


@dataclass
class InformationRecord2(ChainRecord):
    article_code: ClassVar[str] = "2"


@dataclass
class InformationRecord3(ChainRecord):
    article_code: ClassVar[str] = "3"


@dataclass
class FreeCommunicationRecord(ChainRecord):
    """Free communications chain through the link code, not the next code."""

    @property
    def continues(self) -> bool:
        return self.link_code == "1"


def parse_header(line: str) -> Header:
    cursor = FieldCursor(line).skip(5)
    return Header(
        date=parse_date(cursor.take(6)),
        bank_identification_number=cursor.take(3),
        application_code=cursor.take(2),
        duplicate=cursor.take(1) == DUPLICATE,
        file_reference=cursor.skip(7).take_text(10),
        name=cursor.take_text(26),
        bic=cursor.take_text(11),
        identification_number=cursor.take(11),
        external_application_code=cursor.skip(1).take(5),
        transaction_reference=cursor.take_text(16),
        related_reference=cursor.take_text(16),
        version=to_int(cursor.skip(7).take(1)),
    )


def parse_old_balance(line: str) -> OldBalance:
    structure = to_int(line[1])
    return OldBalance(
        structure=structure,
        sequence_number=line[2:5],
        account=parse_account(structure, line[5:42]),
        balance=to_amount(line[42], line[43:58]),
        date=parse_date(line[58:64]),
        holder_name=line[64:90].strip(),
        description=line[90:125].strip(),
        coda_sequence_number=line[125:128],
    )


def parse_new_balance(line: str, structure: int | None) -> NewBalance:
    return NewBalance(
        sequence_number=line[1:4],
        account=None if structure is None else parse_account(structure, line[4:41]),
        balance=to_amount(line[41], line[42:57]),
        date=parse_date(line[57:63]),
        link_code=line[127],
    )


def parse_movement_1(line: str) -> MovementRecord1:
    return MovementRecord1(
        sequence=line[2:6],
        detail_sequence=line[6:10],
        reference_number=line[10:31].strip(),
        amount=to_amount(line[31], line[32:47]),
        value_date=parse_date(line[47:53]),
        transaction_code=TransactionCode.from_field(line[53:61]),
        communication_type=communication_type(line[61]),
        communication=line[62:115],
        entry_date=parse_date(line[115:121]),
        sequence_number=line[121:124],
        globalisation_code=line[124],
        next_code=line[125],
        link_code=line[127],
    )


def parse_movement_2(line: str) -> MovementRecord2:
    return MovementRecord2(
        sequence=line[2:6],
        detail_sequence=line[6:10],
        communication=line[10:63],
        customer_reference=line[63:98].strip(),
        bic=line[98:109].strip(),
        r_transaction_type=line[112].strip(),
        r_reason=line[113:117].strip(),
        category_purpose=line[117:121].strip(),
        purpose=line[121:125].strip(),
        next_code=line[125],
        link_code=line[127],
    )


def parse_movement_3(line: str) -> MovementRecord3:
    number, _, currency = line[10:47].strip().partition(" ")
    return MovementRecord3(
        sequence=line[2:6],
        detail_sequence=line[6:10],
        counterparty=Counterparty(
            name=line[47:82].strip(),
            account_number=number,
            currency=currency.strip(),
        ),
        communication=line[82:115],
        next_code=line[125],
        link_code=line[127],
    )


def parse_information_1(line: str) -> InformationRecord1:
    return InformationRecord1(
        sequence=line[2:6],
        detail_sequence=line[6:10],
        reference_number=line[10:31].strip(),
        transaction_code=TransactionCode.from_field(line[31:39]),
        communication_type=communication_type(line[39]),
        communication=line[40:113],
        next_code=line[125],
        link_code=line[127],
    )


def parse_information_2(line: str) -> InformationRecord2:
    return InformationRecord2(
        sequence=line[2:6],
        detail_sequence=line[6:10],
        communication=line[10:115],
        next_code=line[125],
        link_code=line[127],
    )


def parse_information_3(line: str) -> InformationRecord3:
    return InformationRecord3(
        sequence=line[2:6],
        detail_sequence=line[6:10],
        communication=line[10:100],
        next_code=line[125],
        link_code=line[127],
    )


def parse_free_communication(line: str) -> FreeCommunicationRecord:
    return FreeCommunicationRecord(
        sequence=line[2:6],
        detail_sequence=line[6:10],
        communication=line[32:112],
        next_code="0",
        link_code=line[127],
    )


def parse_trailer(line: str) -> Trailer:
    return Trailer(
        number_of_records=to_int(line[16:22]),
        debit_amount=to_decimal(line[22:37], 3),
        credit_amount=to_decimal(line[37:52], 3),
        multiple_file_code=line[127].strip(),
    )


MOVEMENT_ARTICLES = {
    "1": parse_movement_1,
    "2": parse_movement_2,
    "3": parse_movement_3,
}
INFORMATION_ARTICLES = {
    "1": parse_information_1,
    "2": parse_information_2,
    "3": parse_information_3,
}


def parse_article(line: str, articles: dict) -> ChainRecord:
    if line[1] not in articles:
        raise UnknownRecordType(line)
    record = articles[line[1]](line)
    logger.debug(
        f"Decoded {type(record).__name__} {record.sequence}/{record.detail_sequence}"
    )
    return record


def fit_line(line: str) -> str:
    """Strip the line ending and pad lines whose trailing blanks were trimmed."""
    return line.rstrip("\r\n").ljust(LINE_WIDTH)
