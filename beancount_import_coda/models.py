#!/usr/bin/env python3

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import date, datetime
from decimal import Decimal
from typing import Any, ClassVar, Literal

from beancount_import_coda import codebooks
from beancount_import_coda.errors import UnknownAccountStructure
from beancount_import_coda.stream import FieldCursor

CommunicationType = Literal["unstructured", "structured"]


def _plain(value: Any) -> Any:
    if isinstance(value, Model):
        return value.as_dict()
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


class Model:
    """Mixin for the decoded tree.

    `derived` names read-only attributes (descriptions looked up from a sibling
    code) that `as_dict` exports next to the stored fields.
    """

    derived: ClassVar[tuple[str, ...]] = ()

    def as_dict(self) -> dict[str, Any]:
        out = {
            f.name: _plain(getattr(self, f.name)) for f in fields(self)  # type: ignore
        }
        for name in self.derived:
            out[name] = _plain(getattr(self, name))
        return out


@dataclass
class TransactionCode(Model):
    type: str
    family: str
    transaction: str
    category: str

    derived: ClassVar[tuple[str, ...]] = (
        "family_description",
        "transaction_description",
        "category_description",
    )

    @classmethod
    def from_field(cls, raw: str) -> TransactionCode:
        cursor = FieldCursor(raw)
        return cls(
            type=cursor.take(1),
            family=cursor.take(2),
            transaction=cursor.take(2),
            category=cursor.take(3),
        )

    @property
    def family_description(self) -> str:
        return codebooks.FAMILIES[self.family]

    @property
    def transaction_description(self) -> str:
        return codebooks.transaction_description(self.family, self.transaction)

    @property
    def category_description(self) -> str:
        return codebooks.CATEGORIES[self.category]

    def __str__(self) -> str:
        return f"{self.type}{self.family}{self.transaction}{self.category}"


class Account(Model):
    type: ClassVar[int]
    derived: ClassVar[tuple[str, ...]] = ("type", "type_description")

    number: str
    currency: str

    @property
    def type_description(self) -> str:
        return codebooks.ACCOUNT_STRUCTURES[self.type]


@dataclass
class BelgianAccount(Account):
    type: ClassVar[int] = 0

    number: str
    currency: str
    qualification_code: str
    country: str
    extension_zone: str


@dataclass
class ForeignAccount(Account):
    type: ClassVar[int] = 1

    number: str
    currency: str


@dataclass
class BelgianIbanAccount(Account):
    type: ClassVar[int] = 2

    number: str
    currency: str


@dataclass
class ForeignIbanAccount(Account):
    type: ClassVar[int] = 3

    number: str
    currency: str


def parse_account(structure: int, raw: str) -> Account:
    """Decode the 37 column account number and currency zone.

    The layout is selected by the account structure digit of the old balance
    record.
    """
    cursor = FieldCursor(raw)
    if structure == 0:
        return BelgianAccount(
            number=cursor.take_text(12),
            currency=cursor.skip(1).take_text(3),
            qualification_code=cursor.take_text(1),
            country=cursor.take_text(2),
            extension_zone=cursor.skip(3).take_text(15),
        )
    if structure == 1:
        return ForeignAccount(number=cursor.take_text(34), currency=cursor.take_text(3))
    if structure == 2:
        return BelgianIbanAccount(
            number=cursor.take_text(31), currency=cursor.skip(3).take_text(3)
        )
    if structure == 3:
        return ForeignIbanAccount(
            number=cursor.take_text(34), currency=cursor.take_text(3)
        )
    raise UnknownAccountStructure(structure)


@dataclass
class Header(Model):
    date: date | None
    bank_identification_number: str
    application_code: str
    duplicate: bool
    file_reference: str
    name: str
    bic: str
    identification_number: str
    external_application_code: str
    transaction_reference: str
    related_reference: str
    version: int


@dataclass
class OldBalance(Model):
    structure: int
    sequence_number: str
    account: Account
    balance: Decimal
    date: date | None
    holder_name: str
    description: str
    coda_sequence_number: str


@dataclass
class NewBalance(Model):
    sequence_number: str
    account: Account | None
    balance: Decimal
    date: date | None
    link_code: str


@dataclass
class Balances(Model):
    old: OldBalance | None = None
    new: NewBalance | None = None


@dataclass
class Counterparty(Model):
    name: str
    account_number: str
    currency: str


@dataclass
class Information(Model):
    article_code: str
    sequence: str
    detail_sequence: str
    reference_number: str | None = None
    transaction_code: TransactionCode | None = None
    communication_type: CommunicationType | None = None
    communication: Any = ""


@dataclass
class Movement(Model):
    article_code: str
    sequence: str
    detail_sequence: str
    reference_number: str | None = None
    amount: Decimal | None = None
    value_date: date | None = None
    transaction_code: TransactionCode | None = None
    communication_type: CommunicationType | None = None
    communication: Any = ""
    entry_date: date | None = None
    sequence_number: str | None = None
    globalisation_code: str | None = None
    customer_reference: str | None = None
    bic: str | None = None
    r_transaction_type: str | None = None
    r_reason: str | None = None
    category_purpose: str | None = None
    purpose: str | None = None
    counterparty: Counterparty | None = None
    information: list[Information] = field(default_factory=list)


@dataclass
class FreeCommunication(Model):
    sequence: str
    detail_sequence: str
    text: str


@dataclass
class Trailer(Model):
    number_of_records: int
    debit_amount: Decimal
    credit_amount: Decimal
    multiple_file_code: str

    derived: ClassVar[tuple[str, ...]] = ("multiple_file_code_description",)

    @property
    def multiple_file_code_description(self) -> str:
        return codebooks.MULTIPLE_FILE_CODES[self.multiple_file_code]


@dataclass
class Document(Model):
    header: Header | None = None
    balance: Balances = field(default_factory=Balances)
    movements: list[Movement] = field(default_factory=list)
    information: list[Information] = field(default_factory=list)
    free_communications: list[FreeCommunication] = field(default_factory=list)
    trailer: Trailer | None = None


@dataclass
class InducedPosting:
    flag: Literal["*"] | Literal["!"]
    account: str


@dataclass
class TXN:
    owner_account: str
    date: date | datetime
    posting_type: str
    reference: str
    payee_name: str
    payee_account: str
    payee_bic: str
    amount: Decimal
    currency: str
    bank_reference: str = ""
    induced_postings: list[InducedPosting] = field(default_factory=list)
    meta: dict[str, str] = field(default_factory=dict)
