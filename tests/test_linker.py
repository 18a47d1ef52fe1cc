#!/usr/bin/env python3

from decimal import Decimal

from beancount_import_coda.linker import link_information
from beancount_import_coda.models import Information, Movement


def make_movement(sequence="0001", reference_number="0001200002835"):
    return Movement(
        article_code="1",
        sequence=sequence,
        detail_sequence="0000",
        reference_number=reference_number,
        amount=Decimal("10"),
    )


def make_information(sequence="0001", reference_number="0001200002835", detail="0001"):
    return Information(
        article_code="1",
        sequence=sequence,
        detail_sequence=detail,
        reference_number=reference_number,
        communication="DETAIL",
    )


def test_matching_information_moves_into_movement():
    movement = make_movement()
    information = make_information()

    remaining = link_information([movement], [information])

    assert remaining == []
    assert movement.information == [information]


def test_key_uses_sequence_and_reference():
    movement = make_movement(sequence="0001")
    other_sequence = make_information(sequence="0002")
    other_reference = make_information(reference_number="9999999999999")

    remaining = link_information([movement], [other_sequence, other_reference])

    assert remaining == [other_sequence, other_reference]
    assert movement.information == []


def test_information_keeps_arrival_order():
    movement = make_movement()
    first = make_information(detail="0001")
    second = make_information(detail="0002")

    link_information([movement], [first, second])

    assert [i.detail_sequence for i in movement.information] == ["0001", "0002"]


def test_colliding_keys_attach_to_every_match():
    first = make_movement()
    second = make_movement()
    information = make_information()

    remaining = link_information([first, second], [information])

    assert remaining == []
    assert first.information == [information]
    assert second.information == [information]


def test_information_without_reference_is_not_linked():
    movement = make_movement(reference_number=None)
    orphan = make_information(reference_number=None)

    assert link_information([movement], [orphan]) == [orphan]
    assert movement.information == []


def test_blank_reference_is_a_regular_key():
    movement = make_movement(reference_number="")
    information = make_information(reference_number="")

    assert link_information([movement], [information]) == []
    assert movement.information == [information]
