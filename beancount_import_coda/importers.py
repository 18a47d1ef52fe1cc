#!/usr/bin/env python3

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from decimal import Decimal

from beancount.core import flags
from beancount.core.amount import Amount
from beancount.core.data import (
    EMPTY_SET,
    Balance,
    Directive,
    Posting,
    Transaction,
    new_metadata,
)

from beancount_import_coda.communications import (
    CreditorReference,
    NumberReference,
    StructuredCommunication,
    StructuredReference,
)
from beancount_import_coda.errors import CodaError
from beancount_import_coda.models import TXN, Document, Movement
from beancount_import_coda.parser import parse
from beancount_import_coda.records import LINE_WIDTH

logger = logging.getLogger(__name__)


def _fname(file) -> str:
    """Path of a beancount file memo, an open file or a plain path."""
    if isinstance(file, (str, os.PathLike)):
        return os.fspath(file)
    return file.name


def _day(value: date | datetime | None) -> date | None:
    return value.date() if isinstance(value, datetime) else value


def communication_text(communication: str | StructuredCommunication) -> str:
    """Narration for a movement communication."""
    if isinstance(communication, str):
        return communication
    if isinstance(communication, StructuredReference):
        return communication.formatted
    if isinstance(communication, (CreditorReference, NumberReference)):
        return communication.value
    return communication.type_description


@dataclass
class CodaImporter:
    """Beancount importer for CODA statements of Belgian banks."""

    account: str
    account_number: str | None = None
    currency: str = "EUR"
    file_encoding: str = "ISO-8859-1"
    balance_directive: bool = True
    flag: str = flags.FLAG_OKAY

    def parse_file(self, file) -> Document:
        with open(_fname(file), encoding=self.file_encoding) as f:
            return parse(f.read())

    def account_currency(self, document: Document) -> str:
        if document.balance.old and document.balance.old.account.currency:
            return document.balance.old.account.currency
        return self.currency

    def identify(self, file) -> bool:
        logger.info(f"Looking at {_fname(file)}")
        try:
            with open(_fname(file), encoding=self.file_encoding) as f:
                header = f.readline().rstrip("\r\n")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Could not read {_fname(file)}: {e}")
            return False

        if not header.startswith("0") or len(header.rstrip()) > LINE_WIDTH:
            logger.debug("No CODA header record found.")
            return False
        if self.account_number is None:
            return True

        try:
            document = self.parse_file(file)
        except CodaError as e:
            logger.debug(f"Not a decodable CODA file: {e}")
            return False
        if document.balance.old is None:
            return False
        number = document.balance.old.account.number
        if number != self.account_number:
            logger.debug(f"{number=} != {self.account_number}")
            return False
        logger.info(f"{number=} found.")
        return True

    def movement_to_txn(self, movement: Movement, document: Document) -> TXN:
        counterparty = movement.counterparty
        owner = document.balance.old.account.number if document.balance.old else ""
        booked = movement.entry_date or movement.value_date
        if booked is None and document.header is not None:
            booked = document.header.date

        meta = {}
        if movement.reference_number:
            meta["reference_number"] = movement.reference_number
        if movement.transaction_code is not None:
            meta["transaction_code"] = str(movement.transaction_code)
        if counterparty is not None and counterparty.account_number:
            meta["counterparty_account"] = counterparty.account_number

        return TXN(
            owner_account=owner,
            date=_day(booked),  # type: ignore
            posting_type=(
                movement.transaction_code.transaction_description
                if movement.transaction_code is not None
                else ""
            ),
            reference=communication_text(movement.communication),
            payee_name=counterparty.name if counterparty is not None else "",
            payee_account=(
                counterparty.account_number if counterparty is not None else ""
            ),
            payee_bic=movement.bic or "",
            amount=movement.amount if movement.amount is not None else Decimal(0),
            currency=self.account_currency(document),
            bank_reference=movement.reference_number or "",
            meta=meta,
        )

    def extract(self, file, existing_entries=None) -> list[Directive]:
        document = self.parse_file(file)
        extracted_directives: list[Directive] = []
        for movement in document.movements:
            txn = self.movement_to_txn(movement, document)
            logger.debug(f"Converted to {txn=}")
            transaction = make_transaction(
                account=self.account,
                txn=txn,
                fname=_fname(file),
                lineno=int(movement.sequence),
                flag=self.flag,
            )
            logger.info(f"New {transaction=}")
            extracted_directives.append(transaction)

        new = document.balance.new
        if self.balance_directive and new is not None and new.date is not None:
            final_balance = make_balance(
                fname=_fname(file),
                lineno=0,
                date=_day(new.date),  # type: ignore
                account=self.account,
                currency=self.account_currency(document),
                amount=new.balance,
            )
            logger.info(f"New {final_balance=}")
            extracted_directives.append(final_balance)

        return extracted_directives

    def file_account(self, _):
        return self.account

    def file_date(self, file) -> date | None:
        document = self.parse_file(file)
        if document.balance.new is not None and document.balance.new.date:
            return _day(document.balance.new.date)
        return _day(document.header.date) if document.header else None

    def file_name(self, file) -> str | None:
        document = self.parse_file(file)
        statement_date = self.file_date(file)
        if document.balance.old is None or statement_date is None:
            return None
        sequence = document.balance.old.coda_sequence_number
        return f"{statement_date.isoformat()}.{sequence}.coda"


def make_transaction(
    account: str, txn: TXN, fname: str, lineno: int, flag: str
) -> Transaction:
    postings = [make_posting(account=account, amount=txn.amount, currency=txn.currency)]
    for posting in txn.induced_postings:
        postings.append(
            make_posting(
                account=posting.account, amount=None, currency=None, flag=posting.flag
            )
        )

    return Transaction(
        meta=new_metadata(filename=fname, lineno=lineno, kvlist=txn.meta),
        date=txn.date,
        flag=flag,
        payee=txn.payee_name or None,
        narration=txn.reference,
        tags=EMPTY_SET,
        links=EMPTY_SET,
        postings=postings,
    )


def make_posting(
    amount: Decimal | None,
    currency: str | None,
    account: str,
    flag: str | None = None,
) -> Posting:
    units = Amount(amount, currency) if amount is not None else None
    return Posting(
        account=account,
        units=units,  # type: ignore
        cost=None,
        price=None,
        flag=flag,
        meta=None,
    )


def make_balance(
    fname: str,
    lineno: int,
    date: date,
    account: str,
    currency: str,
    amount: Decimal,
) -> Balance:
    """Balance assertions apply at the start of the day, so use the day after."""
    return Balance(
        meta=new_metadata(filename=fname, lineno=lineno),
        date=date + timedelta(days=1),
        account=account,
        amount=Amount(amount, currency),
        tolerance=None,
        diff_amount=None,
    )
