#!/usr/bin/env python3

from datetime import date
from decimal import Decimal

import pytest
from beancount.core.data import Balance, Transaction
from tests.utils import (
    HEADER,
    MOVEMENT_1,
    MOVEMENT_2,
    MOVEMENT_3,
    TRAILER,
    movement_3_line,
    movement_line,
    statement,
)

from beancount_import_coda.importers import CodaImporter, communication_text
from beancount_import_coda.parser import parse

ACCOUNT = "Assets:Bank:Checking"


@pytest.fixture
def coda_file(tmp_path):
    file = tmp_path / "statement.cod"
    file.write_text(
        statement(
            MOVEMENT_1,
            MOVEMENT_2,
            MOVEMENT_3,
            movement_line(
                sequence="0002",
                reference="0001200002836",
                sign="1",
                amount="000000000042500",
                code="10502000",
                communication="SUBSCRIPTION",
                entry_date="281214",
            ),
        ),
        encoding="ISO-8859-1",
    )
    return file


@pytest.mark.parametrize(
    "account_number, expected",
    [(None, True), ("001548226815", True), ("BE00000000000000", False)],
)
def test_identify(coda_file, account_number, expected):
    importer = CodaImporter(account=ACCOUNT, account_number=account_number)
    with open(coda_file) as f:
        assert importer.identify(f) == expected


@pytest.mark.parametrize(
    "content",
    [
        "Buchungstag;Valutadatum;Betrag\n",
        HEADER + "0" * 12 + "\n",
        "1" + HEADER[1:] + "\n",
    ],
)
def test_identify_rejects_other_files(tmp_path, content):
    file = tmp_path / "other.csv"
    file.write_text(content)
    assert CodaImporter(account=ACCOUNT).identify(file) is False


def test_identify_accepts_trimmed_header(tmp_path):
    file = tmp_path / "statement.cod"
    file.write_text("\n".join([HEADER[:127].rstrip(), TRAILER]) + "\n")
    assert CodaImporter(account=ACCOUNT).identify(file) is True


def test_extract(coda_file):
    importer = CodaImporter(account=ACCOUNT)
    entries = importer.extract(coda_file)

    first, second, balance = entries
    assert isinstance(first, Transaction)
    assert first.date == date(2014, 12, 25)
    assert first.payee == "BVBA.BAKKER PIET"
    assert first.narration == "112/4554/46812 813 ANOTHER MESSAGE MESSAGE"
    assert first.flag == "*"
    assert first.postings[0].account == ACCOUNT
    assert first.postings[0].units.number == Decimal("1767.82")
    assert first.postings[0].units.currency == "EUR"
    assert first.meta["reference_number"] == "0001200002835"
    assert first.meta["transaction_code"] == "00112000"
    assert first.meta["counterparty_account"] == "BE54805480215856"

    assert second.date == date(2014, 12, 28)
    assert second.payee is None
    assert second.postings[0].units.number == Decimal("-42.5")
    assert "counterparty_account" not in second.meta

    assert isinstance(balance, Balance)
    assert balance.date == date(2015, 5, 13)
    assert balance.account == ACCOUNT
    assert balance.amount.number == Decimal("-500012.1")


def test_extract_without_balance(coda_file):
    importer = CodaImporter(account=ACCOUNT, balance_directive=False)
    entries = importer.extract(coda_file)
    assert all(isinstance(entry, Transaction) for entry in entries)


def test_file_methods(coda_file):
    importer = CodaImporter(account=ACCOUNT)
    assert importer.file_account(coda_file) == ACCOUNT
    assert importer.file_date(coda_file) == date(2015, 5, 12)
    assert importer.file_name(coda_file) == "2015-05-12.255.coda"


def test_movement_to_txn():
    document = parse(
        statement(
            movement_line(kind="1", communication="101123456789002", next_code="1"),
            movement_3_line(name="ACME NV"),
        )
    )
    importer = CodaImporter(account=ACCOUNT)
    txn = importer.movement_to_txn(document.movements[0], document)

    assert txn.owner_account == "001548226815"
    assert txn.reference == "+++123/4567/89002+++"
    assert txn.payee_name == "ACME NV"
    assert txn.payee_account == "BE54805480215856"
    assert txn.posting_type == "<Unknown>"
    assert txn.currency == "EUR"
    assert txn.bank_reference == "0001200002835"


def test_communication_text_falls_back_to_type_description():
    document = parse(statement(movement_line(kind="1", communication="105" + "0" * 50)))
    assert communication_text(document.movements[0].communication) == (
        "Original amount of the transaction"
    )
