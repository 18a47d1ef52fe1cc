#!/usr/bin/env python3

import logging
from datetime import date
from decimal import Decimal

import pytest
from tests.utils import (
    FREE_COMMUNICATION,
    HEADER,
    INFORMATION_1,
    INFORMATION_2,
    INFORMATION_3,
    MOVEMENT_1,
    MOVEMENT_2,
    MOVEMENT_3,
    NEW_BALANCE,
    OLD_BALANCE,
    TRAILER,
    information_line,
    movement_line,
    statement,
)

from beancount_import_coda.communications import Closing, CounterpartyData
from beancount_import_coda.errors import (
    CodaError,
    UnknownCommunicationStructureType,
    UnknownDateFormat,
    UnknownRecordType,
)
from beancount_import_coda.models import BelgianAccount
from beancount_import_coda.parser import parse

SAMPLE = statement(
    MOVEMENT_1,
    MOVEMENT_2,
    MOVEMENT_3,
    INFORMATION_1,
    INFORMATION_2,
    INFORMATION_3,
    FREE_COMMUNICATION,
)


def test_parse_sample():
    document = parse(SAMPLE)

    assert document.header.name == "CODELICIOUS"
    assert document.balance.old.balance == Decimal("4004.1")
    assert document.balance.new.balance == Decimal("-500012.1")
    assert document.trailer.number_of_records == 15

    (movement,) = document.movements
    assert movement.communication == "112/4554/46812 813 ANOTHER MESSAGE MESSAGE"
    assert movement.counterparty.name == "BVBA.BAKKER PIET"

    # different reference numbers, nothing is linked
    assert movement.information == []
    assert len(document.information) == 2
    assert isinstance(document.information[0].communication, CounterpartyData)
    assert document.information[1].communication == (
        "SOME INFORMATION ABOUT THIS TRANSACTION"
    )

    (free,) = document.free_communications
    assert free.text == "THIS IS A PUBLIC MESSAGE"


def test_parse_is_deterministic():
    assert parse(SAMPLE) == parse(SAMPLE)
    assert parse(SAMPLE).as_dict() == parse(SAMPLE).as_dict()


def test_new_balance_account_uses_old_balance_structure():
    document = parse(statement())
    assert document.balance.new.account == BelgianAccount(
        number="001548226815",
        currency="EUR",
        qualification_code="0",
        country="BE",
        extension_zone="",
    )


def test_new_balance_without_old_balance():
    document = parse("\n".join([HEADER, NEW_BALANCE, TRAILER]))
    assert document.balance.old is None
    assert document.balance.new.account is None
    assert document.balance.new.date == date(2015, 5, 12)


def test_information_is_linked_to_its_movement():
    document = parse(
        statement(
            movement_line(sequence="0001", communication="RENT"),
            information_line(sequence="0001", communication="FOR JANUARY"),
            movement_line(sequence="0002", reference="0001200002836"),
            information_line(sequence="0003", communication="UNRELATED"),
        )
    )

    first, second = document.movements
    assert [i.communication for i in first.information] == ["FOR JANUARY"]
    assert second.information == []
    assert [i.communication for i in document.information] == ["UNRELATED"]


def test_as_dict_exposes_descriptions():
    exported = parse(SAMPLE).as_dict()

    movement = exported["movements"][0]
    assert movement["transaction_code"]["family_description"] == (
        "Domestic or local SEPA credit transfers"
    )
    assert "next_code" not in movement
    assert exported["balance"]["old"]["account"]["type_description"] == (
        "Belgian account number"
    )
    assert exported["information"][0]["communication"]["type_description"] == (
        "Data concerning the counterparty"
    )
    assert exported["trailer"]["multiple_file_code_description"] == (
        "another file is following"
    )


def test_tolerates_blank_lines_and_carriage_returns():
    text = "\r\n".join(["", HEADER, "", OLD_BALANCE.rstrip(), NEW_BALANCE, ""])
    document = parse(text + "\r\n\r\n")
    assert document.header.file_reference == "0938409934"
    assert document.balance.old.coda_sequence_number == "255"


def test_truncated_chain_is_not_an_error(caplog):
    with caplog.at_level(logging.WARNING):
        document = parse("\n".join([HEADER, OLD_BALANCE, MOVEMENT_1]))
    (movement,) = document.movements
    assert movement.communication == "112/4554/46812 813"
    assert "TruncatedContinuationChain" in caplog.text


def test_truncated_structured_chain_keeps_the_decoded_fields(caplog):
    closing = "108" + "0" * 42 + "011214" + "31"
    with caplog.at_level(logging.WARNING):
        document = parse(
            statement(movement_line(kind="1", communication=closing, next_code="1"))
        )

    (movement,) = document.movements
    assert isinstance(movement.communication, Closing)
    assert movement.communication.period_from == date(2014, 12, 1)
    assert movement.communication.period_to is None
    assert "TruncatedContinuationChain" in caplog.text


def test_empty_input():
    document = parse("")
    assert document.header is None
    assert document.movements == []


@pytest.mark.parametrize(
    "line, error",
    [
        ("5" + HEADER[1:], UnknownRecordType),
        ("24" + MOVEMENT_1[2:], UnknownRecordType),
        (
            movement_line(kind="1", communication="199"),
            UnknownCommunicationStructureType,
        ),
        (movement_line(entry_date="321399"), UnknownDateFormat),
    ],
)
def test_structural_errors_abort_the_document(line, error):
    with pytest.raises(error) as excinfo:
        parse(statement(line))
    assert isinstance(excinfo.value, CodaError)
    assert isinstance(excinfo.value, ValueError)


def test_unknown_record_type_reports_the_type():
    with pytest.raises(UnknownRecordType) as excinfo:
        parse("7" + HEADER[1:])
    assert excinfo.value.record_type == "7"
