#!/usr/bin/env python3
"""Structured communications (CODA enclosure III).

A structured communication starts with a 3 digit type that selects the
layout of the remaining characters. Movement records (types 1xx) and
information records (types 0xx) use separate tables.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import ClassVar, Union

from beancount_import_coda import codebooks
from beancount_import_coda.codebooks import Codebook
from beancount_import_coda.dates import parse_date
from beancount_import_coda.errors import (
    UnknownCommunicationStructureType,
    UnknownCommunicationType,
)
from beancount_import_coda.models import Model
from beancount_import_coda.stream import FieldCursor, normalize_whitespace, to_amount

logger = logging.getLogger(__name__)

NO_MATURITY = "999999"
MINIMUM_APPLICABLE = "1"

MOVEMENT_TYPES = Codebook(
    {
        100: "Payment with a structured format communication applying the ISO "
        "standard 11649: Structured creditor reference to remittance information",
        101: "Credit transfer or cash payment with structured format communication",
        102: "Credit transfer or cash payment with reconstituted structured "
        "format communication",
        103: "Number (e.g. of the cheque, of the card, etc.)",
        105: "Original amount of the transaction",
        106: "Method of calculation (VAT, withholding tax on income, commission, etc.)",
        108: "Closing",
        111: "POS credit - Globalisation",
        113: "ATM/POS debit",
        114: "POS credit - individual transaction",
        115: "Terminal cash deposit",
        121: "Commercial bills",
        122: "Bills - calculation of interest",
        123: "Fees and commissions",
        124: "Number of the credit card",
        125: "Credit",
        126: "Term investments",
        127: "European direct debit (SEPA)",
    }
)

INFORMATION_TYPES = Codebook(
    {
        1: "Data concerning the counterparty",
        2: "Communication from the bank",
        4: "Counterparty's banker",
        5: "Data concerning the correspondent",
        6: "Information concerning the detail amount",
        7: "Information concerning the detail cash",
        8: "Identification of the ultimate beneficiary/creditor (SEPA SCT/SDD)",
        9: "Identification of the ultimate ordering customer/debtor (SEPA SCT/SDD)",
        10: "Information pertaining to sale or purchase of securities",
        11: "Information pertaining to coupons",
    }
)


def _date(cursor: FieldCursor, n: int = 6) -> date | datetime | None:
    raw = cursor.take(n)
    # fields cut off by the end of a short buffer
    if len(raw) < n or not raw.strip():
        return None
    return parse_date(raw)


def _amount(cursor: FieldCursor) -> Decimal:
    """12 + 3 positions."""
    return cursor.take_decimal(15, 3)


def _rate(cursor: FieldCursor) -> Decimal:
    """4 + 8 positions."""
    return cursor.take_decimal(12, 8)


def _minimum(cursor: FieldCursor) -> bool:
    return cursor.take(1) == MINIMUM_APPLICABLE


@dataclass
class StructuredCommunication(Model):
    types: ClassVar[Codebook]
    derived: ClassVar[tuple[str, ...]] = ("type_description",)

    type: int

    @property
    def type_description(self) -> str:
        return self.types[self.type]


class MovementCommunication(StructuredCommunication):
    types: ClassVar[Codebook] = MOVEMENT_TYPES


class InformationCommunication(StructuredCommunication):
    types: ClassVar[Codebook] = INFORMATION_TYPES


@dataclass
class CreditorReference(MovementCommunication):
    value: str

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> CreditorReference:
        return cls(type=type, value=normalize_whitespace(cursor.take(25)))


@dataclass
class StructuredReference(MovementCommunication):
    derived: ClassVar[tuple[str, ...]] = ("type_description", "formatted")

    value: str

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> StructuredReference:
        return cls(type=type, value=cursor.take_text(12))

    @property
    def formatted(self) -> str:
        """Belgian structured communication as printed on transfer forms."""
        v = self.value
        return f"+++{v[:3]}/{v[3:7]}/{v[7:12]}+++"


@dataclass
class NumberReference(MovementCommunication):
    value: str

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> NumberReference:
        return cls(type=type, value=cursor.take_text(12))


@dataclass
class OriginalAmount(MovementCommunication):
    gross_amount_currency_account: Decimal
    gross_amount_original_currency: Decimal
    rate: Decimal
    currency: str
    structured_format_communication: str
    country_code_principal: str
    equivalent_eur: Decimal

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> OriginalAmount:
        return cls(
            type=type,
            gross_amount_currency_account=_amount(cursor),
            gross_amount_original_currency=_amount(cursor),
            rate=_rate(cursor),
            currency=cursor.take_text(3),
            structured_format_communication=cursor.take_text(12),
            country_code_principal=cursor.take_text(2),
            equivalent_eur=_amount(cursor),
        )


@dataclass
class CalculationMethod(MovementCommunication):
    equivalent_currency_account: Decimal
    amount: Decimal
    percent: Decimal
    minimum: bool
    equivalent_eur: Decimal

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> CalculationMethod:
        return cls(
            type=type,
            equivalent_currency_account=_amount(cursor),
            amount=_amount(cursor),
            percent=_rate(cursor),
            minimum=_minimum(cursor),
            equivalent_eur=_amount(cursor),
        )


@dataclass
class Closing(MovementCommunication):
    equivalent_currency_account: Decimal
    interest_rates_calculation_basis: int
    interest: Decimal
    period_from: date | None
    period_to: date | None

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> Closing:
        return cls(
            type=type,
            equivalent_currency_account=_amount(cursor),
            interest_rates_calculation_basis=cursor.take_int(15),
            interest=_rate(cursor),
            period_from=_date(cursor),
            period_to=_date(cursor),
        )


@dataclass
class PosCreditGlobalisation(MovementCommunication):
    derived: ClassVar[tuple[str, ...]] = (
        "type_description",
        "card_scheme_description",
        "transaction_type_description",
    )

    card_scheme: int
    pos_number: str
    period_number: str
    first_transaction_sequence_number: str
    first_transaction_date: date | None
    last_transaction_sequence_number: str
    last_transaction_date: date | None
    transaction_type: int
    terminal_name: str
    terminal_locality: str

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> PosCreditGlobalisation:
        return cls(
            type=type,
            card_scheme=cursor.take_int(1),
            pos_number=cursor.take_text(6),
            period_number=cursor.take_text(3),
            first_transaction_sequence_number=cursor.take_text(6),
            first_transaction_date=_date(cursor),
            last_transaction_sequence_number=cursor.take_text(6),
            last_transaction_date=_date(cursor),
            transaction_type=cursor.take_int(1),
            terminal_name=normalize_whitespace(cursor.take(16)),
            terminal_locality=normalize_whitespace(cursor.take(10)),
        )

    @property
    def card_scheme_description(self) -> str:
        return codebooks.CARD_SCHEMES[self.card_scheme]

    @property
    def transaction_type_description(self) -> str:
        return codebooks.POS_GLOBALISATION_TRANSACTION_TYPES[self.transaction_type]


@dataclass
class AtmPosDebit(MovementCommunication):
    derived: ClassVar[tuple[str, ...]] = (
        "type_description",
        "card_scheme_description",
        "transaction_type_description",
        "product_code_description",
    )

    masked_pan: str
    card_scheme: int
    terminal_number: str
    sequence_number: str
    date: datetime | None
    transaction_type: int
    terminal_name: str
    terminal_city: str
    original_amount: Decimal
    rate: Decimal
    currency: str
    volume: Decimal
    product_code: int
    unit_price: Decimal

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> AtmPosDebit:
        return cls(
            type=type,
            masked_pan=cursor.take_text(16),
            card_scheme=cursor.take_int(1),
            terminal_number=cursor.take_text(6),
            sequence_number=cursor.take_text(6),
            date=_date(cursor, 10),
            transaction_type=cursor.take_int(1),
            terminal_name=cursor.take_text(16),
            terminal_city=cursor.take_text(10),
            original_amount=_amount(cursor),
            rate=_rate(cursor),
            currency=cursor.take_text(3),
            volume=cursor.take_decimal(5, 2),
            product_code=cursor.take_int(2),
            unit_price=cursor.take_decimal(5, 3),
        )

    @property
    def card_scheme_description(self) -> str:
        return codebooks.ATM_POS_CARD_SCHEMES[self.card_scheme]

    @property
    def transaction_type_description(self) -> str:
        return codebooks.ATM_POS_TRANSACTION_TYPES[self.transaction_type]

    @property
    def product_code_description(self) -> str:
        return codebooks.PRODUCT_CODES[self.product_code]


@dataclass
class PosCreditIndividual(MovementCommunication):
    derived: ClassVar[tuple[str, ...]] = (
        "type_description",
        "card_scheme_description",
        "transaction_type_description",
    )

    card_scheme: int
    pos_number: str
    period_number: str
    sequence_number: str
    date: datetime | None
    transaction_type: int
    terminal_name: str
    terminal_city: str
    reference: str

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> PosCreditIndividual:
        return cls(
            type=type,
            card_scheme=cursor.take_int(1),
            pos_number=cursor.take_text(6),
            period_number=cursor.take_text(3),
            sequence_number=cursor.take_text(6),
            date=_date(cursor, 10),
            transaction_type=cursor.take_int(1),
            terminal_name=cursor.take_text(16),
            terminal_city=cursor.take_text(10),
            reference=cursor.take_text(16),
        )

    @property
    def card_scheme_description(self) -> str:
        return codebooks.CARD_SCHEMES[self.card_scheme]

    @property
    def transaction_type_description(self) -> str:
        return codebooks.POS_INDIVIDUAL_TRANSACTION_TYPES[self.transaction_type]


@dataclass
class TerminalCashDeposit(MovementCommunication):
    derived: ClassVar[tuple[str, ...]] = ("type_description", "card_scheme_description")

    masked_pan: str
    card_scheme: int
    terminal_number: str
    sequence_number: str
    payment_date: datetime | None
    validation_date: date | None
    sequence_number_validation: str
    original_amount_customer: Decimal
    conformity_code: str
    terminal_name: str
    terminal_locality: str
    message: str

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> TerminalCashDeposit:
        return cls(
            type=type,
            masked_pan=cursor.take_text(16),
            card_scheme=cursor.take_int(1),
            terminal_number=cursor.take_text(6),
            sequence_number=cursor.take_text(6),
            payment_date=_date(cursor, 10),
            validation_date=_date(cursor),
            sequence_number_validation=cursor.take_text(6),
            original_amount_customer=_amount(cursor),
            conformity_code=cursor.take_text(1),
            terminal_name=normalize_whitespace(cursor.take(16)),
            terminal_locality=normalize_whitespace(cursor.take(10)),
            message=cursor.take_text(12),
        )

    @property
    def card_scheme_description(self) -> str:
        return codebooks.CASH_DEPOSIT_CARD_SCHEMES[self.card_scheme]


@dataclass
class CommercialBill(MovementCommunication):
    amount: Decimal
    maturity_date: date | None
    conventional_maturity_date: date | None
    issue_date: date | None
    company_number: str
    currency: str
    number: str
    exchange_rate: Decimal

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> CommercialBill:
        return cls(
            type=type,
            amount=_amount(cursor),
            maturity_date=_date(cursor),
            conventional_maturity_date=_date(cursor),
            issue_date=_date(cursor),
            company_number=cursor.take_text(11),
            currency=cursor.take_text(3),
            number=cursor.skip(3).take_text(13),
            exchange_rate=_rate(cursor),
        )


@dataclass
class BillInterest(MovementCommunication):
    number_of_days: int
    interest_rate: Decimal
    basic_amount: Decimal
    minimum_rate: bool
    number: str
    maturity_date: date | None

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> BillInterest:
        return cls(
            type=type,
            number_of_days=cursor.take_int(4),
            interest_rate=_rate(cursor),
            basic_amount=_amount(cursor),
            minimum_rate=_minimum(cursor),
            number=cursor.take_text(13),
            maturity_date=_date(cursor),
        )


@dataclass
class FeesAndCommissions(MovementCommunication):
    starting_date: date | None
    maturity_date: date | None
    basic_amount: Decimal
    percentage: Decimal
    term_in_days: int
    minimum_rate: bool
    guarantee_number: str

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> FeesAndCommissions:
        starting_date = _date(cursor)
        # 999999 marks a guarantee without fixed term
        if cursor.text.startswith(NO_MATURITY, cursor.pos):
            cursor.skip(6)
            maturity_date = None
        else:
            maturity_date = _date(cursor)
        return cls(
            type=type,
            starting_date=starting_date,
            maturity_date=maturity_date,
            basic_amount=_amount(cursor),
            percentage=_rate(cursor),
            term_in_days=cursor.take_int(4),
            minimum_rate=_minimum(cursor),
            guarantee_number=cursor.take_text(13),
        )


@dataclass
class CreditCardNumber(MovementCommunication):
    derived: ClassVar[tuple[str, ...]] = (
        "type_description",
        "issuing_institution_description",
    )

    masked_pan: str
    issuing_institution: int
    invoice_number: str
    identification_number: str
    date: date | None

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> CreditCardNumber:
        return cls(
            type=type,
            masked_pan=cursor.take_text(20),
            issuing_institution=cursor.take_int(1),
            invoice_number=cursor.take_text(12),
            identification_number=cursor.take_text(15),
            date=_date(cursor),
        )

    @property
    def issuing_institution_description(self) -> str:
        return codebooks.ISSUING_INSTITUTIONS[self.issuing_institution]


@dataclass
class Credit(MovementCommunication):
    account_number: str
    extension_zone_account_number: str
    old_balance: Decimal
    new_balance: Decimal
    amount: Decimal
    currency: str
    start_date: date | None
    end_date: date | None
    nominal_interest_rate: Decimal
    reference: str

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> Credit:
        return cls(
            type=type,
            account_number=cursor.take_text(12),
            extension_zone_account_number=cursor.take_text(15),
            old_balance=_amount(cursor),
            new_balance=_amount(cursor),
            amount=_amount(cursor),
            currency=cursor.take_text(3),
            start_date=_date(cursor),
            end_date=_date(cursor),
            nominal_interest_rate=_rate(cursor),
            reference=cursor.take_text(13),
        )


@dataclass
class TermInvestment(MovementCommunication):
    deposit_number: str
    deposit_amount: Decimal
    equivalent_currency_account: Decimal
    start_date: date | None
    end_date: date | None
    interest_rate: Decimal
    amount_of_interest: Decimal
    currency: str
    rate: Decimal

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> TermInvestment:
        return cls(
            type=type,
            deposit_number=cursor.take_text(15),
            deposit_amount=_amount(cursor),
            equivalent_currency_account=_amount(cursor),
            start_date=_date(cursor),
            end_date=_date(cursor),
            interest_rate=_rate(cursor),
            amount_of_interest=_amount(cursor),
            currency=cursor.take_text(3),
            rate=_rate(cursor),
        )


@dataclass
class SepaDirectDebit(MovementCommunication):
    derived: ClassVar[tuple[str, ...]] = (
        "type_description",
        "type_direct_debit_description",
        "direct_debit_scheme_description",
        "paid_or_reason_for_refused_payment_description",
        "type_of_r_transaction_description",
    )

    settlement_date: date | None
    type_direct_debit: int
    direct_debit_scheme: int
    paid_or_reason_for_refused_payment: int
    creditor_identification_code: str
    mandate_reference: str
    communication: str
    type_of_r_transaction: int
    reason: str

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> SepaDirectDebit:
        return cls(
            type=type,
            settlement_date=_date(cursor),
            type_direct_debit=cursor.take_int(1),
            direct_debit_scheme=cursor.take_int(1),
            paid_or_reason_for_refused_payment=cursor.take_int(1),
            creditor_identification_code=cursor.take_text(35),
            mandate_reference=cursor.take_text(35),
            communication=cursor.take_text(62),
            type_of_r_transaction=cursor.take_int(1),
            reason=cursor.take_text(4),
        )

    @property
    def type_direct_debit_description(self) -> str:
        return codebooks.DIRECT_DEBIT_TYPES[self.type_direct_debit]

    @property
    def direct_debit_scheme_description(self) -> str:
        return codebooks.DIRECT_DEBIT_SCHEMES[self.direct_debit_scheme]

    @property
    def paid_or_reason_for_refused_payment_description(self) -> str:
        return codebooks.PAYMENT_REASONS[self.paid_or_reason_for_refused_payment]

    @property
    def type_of_r_transaction_description(self) -> str:
        return codebooks.R_TRANSACTION_TYPES[self.type_of_r_transaction]


@dataclass
class CounterpartyData(InformationCommunication):
    name: str
    address: str
    locality: str
    identification_code: str

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> CounterpartyData:
        return cls(
            type=type,
            name=cursor.take_text(70),
            address=normalize_whitespace(cursor.take(35)),
            locality=normalize_whitespace(cursor.take(35)),
            identification_code=cursor.take_text(35),
        )


@dataclass
class BankText(InformationCommunication):
    value: str

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> BankText:
        return cls(type=type, value="\n".join(cursor.take_text(35) for _ in range(4)))


@dataclass
class DetailAmount(InformationCommunication):
    derived: ClassVar[tuple[str, ...]] = ("type_description", "category_description")

    description: str
    currency: str
    amount: Decimal
    category: str

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> DetailAmount:
        description = cursor.take_text(30)
        currency = cursor.take_text(3)
        raw_amount = cursor.take(15)
        return cls(
            type=type,
            description=description,
            currency=currency,
            amount=to_amount(cursor.take(1), raw_amount),
            category=cursor.take(3),
        )

    @property
    def category_description(self) -> str:
        return codebooks.CATEGORIES[self.category]


@dataclass
class CashDetail(InformationCommunication):
    number: int
    denomination: Decimal
    total: Decimal

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> CashDetail:
        return cls(
            type=type,
            number=cursor.take_int(7),
            denomination=cursor.take_decimal(6, 3),
            total=_amount(cursor),
        )


@dataclass
class UltimateParty(InformationCommunication):
    name: str
    identification_code: str

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> UltimateParty:
        return cls(
            type=type,
            name=cursor.take_text(70),
            identification_code=cursor.take_text(35),
        )


@dataclass
class SecuritiesDetail(InformationCommunication):
    derived: ClassVar[tuple[str, ...]] = (
        "type_description",
        "securities_code_type_description",
    )

    order_number: str
    bank_reference_number: str
    customer_reference_number: str
    securities_code_type: str
    securities_code_value: str
    method: str
    number: Decimal
    currency: str
    number_per_transaction_unit: int
    quotation_currency: str
    stock_exchange_rate: Decimal
    exchange_rate: Decimal
    name: str
    bordereau_number: str
    coupon_number: str
    coupon_payment_date: str
    country_stock_exchange_market: str
    purchase_sale_date: date | None
    nature: str
    nominal_value: Decimal

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> SecuritiesDetail:
        return cls(
            type=type,
            order_number=cursor.take_text(13),
            bank_reference_number=cursor.take_text(15),
            customer_reference_number=cursor.take_text(13),
            securities_code_type=cursor.take_text(2),
            securities_code_value=cursor.take_text(15),
            method=cursor.take_text(1),
            number=cursor.take_decimal(12, 4),
            currency=cursor.take_text(3),
            number_per_transaction_unit=cursor.take_int(4),
            quotation_currency=cursor.take_text(3),
            stock_exchange_rate=cursor.take_decimal(12, 4),
            exchange_rate=_rate(cursor),
            name=cursor.take_text(40),
            bordereau_number=cursor.take_text(13),
            coupon_number=cursor.take_text(8),
            coupon_payment_date=cursor.take_text(8),
            country_stock_exchange_market=cursor.take_text(30),
            purchase_sale_date=_date(cursor, 8),
            nature=cursor.take_text(24),
            nominal_value=_amount(cursor),
        )

    @property
    def securities_code_type_description(self) -> str:
        return codebooks.SECURITIES_CODE_TYPES[self.securities_code_type]


@dataclass
class CouponDetail(InformationCommunication):
    derived: ClassVar[tuple[str, ...]] = (
        "type_description",
        "securities_code_type_description",
        "amount_type_description",
    )

    order_number: str
    bank_reference_number: str
    customer_reference_number: str
    securities_code_type: str
    securities_code_value: str
    number: Decimal
    name: str
    currency: str
    amount: Decimal
    amount_type: str
    foreign_tax_rate: Decimal
    nature: str
    coupon_number: str
    date: date | None
    exchange_rate: Decimal
    currency_payment: str
    nominal_value: Decimal

    @classmethod
    def decode(cls, type: int, cursor: FieldCursor) -> CouponDetail:
        return cls(
            type=type,
            order_number=cursor.take_text(13),
            bank_reference_number=cursor.take_text(15),
            customer_reference_number=cursor.take_text(13),
            securities_code_type=cursor.take_text(2),
            securities_code_value=cursor.take_text(15),
            number=cursor.take_decimal(12, 4),
            name=cursor.take_text(40),
            currency=cursor.take_text(3),
            amount=cursor.take_decimal(14, 6),
            amount_type=cursor.take_text(1),
            foreign_tax_rate=_amount(cursor),
            nature=cursor.take_text(24),
            coupon_number=cursor.take_text(6),
            date=_date(cursor),
            exchange_rate=_rate(cursor),
            currency_payment=cursor.take_text(3),
            nominal_value=_amount(cursor),
        )

    @property
    def securities_code_type_description(self) -> str:
        return codebooks.SECURITIES_CODE_TYPES[self.securities_code_type]

    @property
    def amount_type_description(self) -> str:
        return codebooks.COUPON_AMOUNT_TYPES[self.amount_type]


MOVEMENT_LAYOUTS: dict[int, type[MovementCommunication]] = {
    100: CreditorReference,
    101: StructuredReference,
    102: StructuredReference,
    103: NumberReference,
    105: OriginalAmount,
    106: CalculationMethod,
    108: Closing,
    111: PosCreditGlobalisation,
    113: AtmPosDebit,
    114: PosCreditIndividual,
    115: TerminalCashDeposit,
    121: CommercialBill,
    122: BillInterest,
    123: FeesAndCommissions,
    124: CreditCardNumber,
    125: Credit,
    126: TermInvestment,
    127: SepaDirectDebit,
}

INFORMATION_LAYOUTS: dict[int, type[InformationCommunication]] = {
    1: CounterpartyData,
    2: BankText,
    4: BankText,
    5: BankText,
    6: DetailAmount,
    7: CashDetail,
    8: UltimateParty,
    9: UltimateParty,
    10: SecuritiesDetail,
    11: CouponDetail,
}

Communication = Union[str, StructuredCommunication]


def _decode(side: str, layouts: dict, payload: str, kind: str) -> Communication:
    if kind == "unstructured":
        return payload
    if kind != "structured":
        raise UnknownCommunicationType(kind)

    cursor = FieldCursor(payload)
    raw_type = cursor.take(3)
    if not raw_type.isdigit() or int(raw_type) not in layouts:
        raise UnknownCommunicationStructureType(side, raw_type)
    layout = layouts[int(raw_type)]
    logger.debug(f"Decoding {side} communication {raw_type} as {layout.__name__}")
    return layout.decode(int(raw_type), cursor)


def parse_movement_communication(payload: str, kind: str) -> Communication:
    return _decode("movement", MOVEMENT_LAYOUTS, payload, kind)


def parse_information_communication(payload: str, kind: str) -> Communication:
    return _decode("information", INFORMATION_LAYOUTS, payload, kind)
