#!/usr/bin/env python3
"""Code to description tables of the CODA 2.6 standard.

Every table is a `Codebook`: looking up a code that is not listed returns
`UNKNOWN` instead of raising.
"""

from __future__ import annotations

UNKNOWN = "<Unknown>"


class Codebook(dict):
    def __init__(self, *args, default: str = UNKNOWN, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.default = default

    def __missing__(self, key) -> str:
        return self.default


ACCOUNT_STRUCTURES = Codebook(
    {
        0: "Belgian account number",
        1: "Foreign account number",
        2: "IBAN of the Belgian account number",
        3: "IBAN of the foreign account number",
    }
)

FAMILIES = Codebook(
    {
        "01": "Domestic or local SEPA credit transfers",
        "41": "International credit transfers - non-SEPA credit transfers",
        "02": "Instant SEPA credit transfer",
        "03": "Cheques",
        "43": "Foreign cheques",
        "04": "Cards",
        "05": "Direct debit",
        "07": "Domestic commercial paper",
        "47": "Foreign commercial paper",
        "09": "Counter transactions",
        "11": "Securities",
        "13": "Credit",
        "30": "Various transactions",
        "35": "Closing (periodical settlements for interest, costs, ...)",
        "80": "Separately charged costs and provisions",
    }
)

TRANSACTIONS = {
    "01": Codebook(
        {
            "01": "Individual transfer order",
            "02": "Individual transfer order initiated by the bank",
            "03": "Standing order",
            "05": "Payment of wages, etc.",
            "07": "Collective transfer",
            "13": "Transfer from your account",
            "17": "Financial centralisation",
            "37": "Costs",
            "39": "Your issue circular cheque",
            "49": "Cancellation or correction",
            "50": "Transfer in your favour",
            "51": "Transfer in your favour – initiated by the bank",
            "52": "Payment in your favour",
            "54": "Unexecutable transfer order",
            "60": "Non-presented circular cheque",
            "62": "Unpaid postal order",
            "64": "Transfer to your account",
            "66": "Financial centralization",
            "87": "Reimbursement of costs",
            "99": "Cancellation or correction",
        }
    ),
    "02": Codebook(
        {
            "01": "Individual transfer order",
            "02": "Individual transfer order initiated by the bank",
            "03": "Standing order",
            "05": "Payment of wages, etc.",
            "07": "Collective transfer",
            "13": "Transfer from your account",
            "17": "Financial centralisation",
            "37": "Costs",
            "49": "Cancellation or correction",
            "50": "Transfer in your favour",
            "51": "Transfer in your favour – initiated by the bank",
            "52": "Payment in your favour",
            "54": "Unexecutable transfer order",
            "64": "Transfer to your account",
            "66": "Financial centralization",
            "87": "Reimbursement of costs",
            "99": "Cancellation or correction",
        }
    ),
    "03": Codebook(
        {
            "01": "Payment of your cheque",
            "05": "Payment of voucher",
            "09": "Unpaid voucher",
            "11": "Department store cheque",
            "15": "Your purchase bank cheque",
            "17": "Your certified cheque",
            "37": "Cheque-related costs",
            "38": "Provisionally unpaid",
            "49": "Cancellation or correction",
            "52": "First credit of cheques, vouchers, luncheon vouchers, "
            "postal orders, credit under usual reserve",
            "58": "Remittance of cheques, vouchers, etc. credit after collection",
            "60": "Reversal of voucher",
            "62": "Reversal of cheque",
            "63": "Second credit of unpaid cheque",
            "66": "Remittance of cheque by your branch - credit under usual reserve",
            "87": "Reimbursement of cheque-related costs",
            "99": "Cancellation or correction",
        }
    ),
    "04": Codebook(
        {
            "01": "Loading a GSM card",
            "02": "Payment by means of a payment card within the Eurozone",
            "03": "Settlement credit cards",
            "04": "Cash withdrawal from an ATM",
            "05": "Loading Proton",
            "06": "Payment with tank card",
            "07": "Payment by GSM",
            "08": "Payment by means of a payment card outside the Eurozone",
            "09": "Upload of prepaid card",
            "10": "Correction for prepaid card",
            "37": "Costs",
            "49": "Cancellation or correction",
            "50": "Credit after a payment at a terminal",
            "51": "Unloading Proton",
            "52": "Loading GSM cards",
            "53": "Cash deposit at an ATM",
            "54": "Download of prepaid card",
            "55": "Income from payments by GSM",
            "56": "Correction for prepaid card",
            "68": "Credit after Proton payments",
            "87": "Reimbursement of costs",
            "99": "Cancellation or correction",
        }
    ),
    "05": Codebook(
        {
            "01": "Payment",
            "03": "Unpaid debt",
            "05": "Reimbursement",
            "37": "Costs",
            "49": "Cancellation or correction",
            "50": "Credit after collection",
            "52": "Credit under usual reserve",
            "54": "Reimbursement",
            "56": "Unexecutable reimbursement",
            "58": "Reversal",
            "87": "Reimbursement of costs",
            "99": "Cancellation or correction",
        }
    ),
    "07": Codebook(
        {
            "01": "Payment commercial paper",
            "05": "Commercial paper claimed back",
            "06": "Extension of maturity date",
            "07": "Unpaid commercial paper",
            "08": "Payment in advance",
            "09": "Agio on supplier's bill",
            "37": "Costs related to commercial paper",
            "39": "Return of an irregular bill of exchange",
            "49": "Cancellation or correction",
            "50": "Remittance of commercial paper - credit after collection",
            "52": "Remittance of commercial paper - credit under usual reserve",
            "54": "Remittance of commercial paper - for discount",
            "56": "Remittance of supplier's bill with guarantee",
            "58": "Remittance of supplier's bill without guarantee",
            "87": "Reimbursement of costs",
            "99": "Cancellation or correction",
        }
    ),
    "09": Codebook(
        {
            "01": "Cash withdrawal",
            "05": "Purchase of foreign bank notes",
            "07": "Purchase of gold/pieces",
            "09": "Purchase of petrol coupons",
            "13": "Cash withdrawal by your branch or agents",
            "17": "Purchase of fiscal stamps",
            "19": "Difference in payment",
            "25": "Purchase of traveller's cheque",
            "37": "Costs",
            "49": "Cancellation or correction",
            "50": "Cash payment",
            "52": "Payment night safe",
            "58": "Payment by your branch/agents",
            "60": "Sale of foreign bank notes",
            "62": "Sale of gold/pieces under usual reserve",
            "68": "Difference in payment",
            "70": "Sale of traveller's cheque",
            "87": "Reimbursement of costs",
            "99": "Cancellation or correction",
        }
    ),
    "11": Codebook(
        {
            "01": "Purchase of securities",
            "02": "Tenders",
            "03": "Subscription to securities",
            "04": "Issues",
            "05": "Partial payment subscription",
            "06": "Share option plan – exercising an option",
            "09": "Settlement of securities",
            "11": "Payable coupons/repayable securities",
            "13": "Your repurchase of issue",
            "15": "Interim interest on subscription",
            "17": "Management fee",
            "19": "Regularisation costs",
            "37": "Costs",
            "49": "Cancellation or correction",
            "50": "Sale of securities",
            "51": "Tender",
            "52": "Payment of coupons from a deposit or settlement of coupons "
            "delivered over the counter - credit under usual reserve",
            "58": "Repayable securities from a deposit or delivered at the "
            "counter - credit under usual reserve",
            "62": "Interim interest on subscription",
            "64": "Your issue",
            "66": "Retrocession of issue commission",
            "68": "Compensation for missing coupon",
            "70": "Settlement of securities",
            "87": "Reimbursement of costs",
            "99": "Cancellation or correction",
        }
    ),
    "13": Codebook(
        {
            "01": "Short-term loan",
            "02": "Long-term loan",
            "05": "Settlement of fixed advance",
            "07": "Your repayment instalment",
            "11": "Your repayment mortgage loan",
            "13": "Settlement of bank acceptances",
            "15": "Your repayment hire-purchase and similar claims",
            "19": "Documentary import credits",
            "21": "Other credit applications",
            "37": "Credit-related costs",
            "49": "Cancellation or correction",
            "50": "Settlement of instalment credit",
            "54": "Fixed advance – capital and interest",
            "55": "Fixed advance – interest only",
            "56": "Subsidy",
            "60": "Settlement of mortgage loan",
            "62": "Term loan",
            "68": "Documentary export credits",
            "70": "Settlement of discount bank acceptance",
            "87": "Reimbursement of costs",
            "99": "Cancellation or correction",
        }
    ),
    "30": Codebook(
        {
            "01": "Spot purchase of foreign exchange",
            "03": "Forward purchase of foreign exchange",
            "05": "Capital and/or interest term investment",
            "33": "Value (date) correction",
            "37": "Costs",
            "39": "Undefined transaction",
            "49": "Cancellation or correction",
            "50": "Spot sale of foreign exchange",
            "52": "Forward sale of foreign exchange",
            "54": "Capital and/or interest term investment",
            "55": "Interest term investment",
            "83": "Value (date) correction",
            "87": "Reimbursement of costs",
            "89": "Undefined transaction",
            "99": "Cancellation or correction",
        }
    ),
    "35": Codebook(
        {
            "01": "Closing",
            "37": "Costs",
            "49": "Cancellation or correction",
            "50": "Closing",
            "87": "Reimbursement of costs",
            "99": "Cancellation or correction",
        }
    ),
    "41": Codebook(
        {
            "01": "Transfer",
            "03": "Standing order",
            "05": "Collective payments of wages",
            "07": "Collective transfers",
            "13": "Transfer from your account",
            "17": "Financial centralisation (debit)",
            "37": "Costs relating to outgoing foreign transfers and non-SEPA transfers",
            "38": "Costs relating to incoming foreign and non-SEPA transfers",
            "49": "Cancellation or correction",
            "50": "Transfer",
            "64": "Transfer to your account",
            "66": "Financial centralisation (credit)",
            "87": "Reimbursement of costs",
            "99": "Cancellation or correction",
        }
    ),
    "43": Codebook(
        {
            "01": "Payment of a foreign cheque",
            "07": "Unpaid foreign cheque",
            "15": "Purchase of an international bank cheque",
            "37": "Costs relating to payment of foreign cheques",
            "49": "Cancellation or correction",
            "52": "Remittance of foreign cheque credit under usual reserve",
            "58": "Remittance of foreign cheque credit after collection",
            "62": "Reversal of cheques",
            "87": "Reimbursement of costs",
            "99": "Cancellation or correction",
        }
    ),
    "47": Codebook(
        {
            "01": "Payment of foreign bill",
            "05": "Bill claimed back",
            "06": "Extension",
            "07": "Unpaid foreign bill",
            "11": "Payment documents abroad",
            "13": "Discount foreign supplier's bills",
            "14": "Warrant fallen due",
            "37": "Costs relating to the payment of a foreign bill",
            "49": "Cancellation or correction",
            "50": "Remittance of foreign bill credit after collection",
            "52": "Remittance of foreign bill credit under usual reserve",
            "54": "Discount abroad",
            "56": "Remittance of guaranteed foreign supplier's bill",
            "58": "Remittance of foreign supplier's bill without guarantee",
            "60": "Remittance of documents abroad - credit under usual reserve",
            "62": "Remittance of documents abroad - credit after collection",
            "64": "Warrant",
            "87": "Reimbursement of costs",
            "99": "Cancellation or correction",
        }
    ),
    "80": Codebook(
        {
            "02": "Costs relating to electronic output",
            "04": "Costs for holding a documentary cash credit",
            "06": "Damage relating to bills and cheques",
            "07": "Insurance costs",
            "08": "Registering compensation for savings accounts",
            "09": "Postage",
            "10": "Purchase of Smartcard",
            "11": "Costs for the safe custody of correspondence",
            "12": "Costs for opening a bank guarantee",
            "13": "Renting of safes",
            "14": "Handling costs instalment credit",
            "15": "Night safe",
            "16": "Bank confirmation to revisor or accountant",
            "17": "Charge for safe custody",
            "18": "Trade information",
            "19": "Special charge for safe custody",
            "20": "Drawing up a certificate",
            "21": "Pay-packet charges",
            "22": "Management/custody",
            "23": "Research costs",
            "24": "Participation in and management of interest refund system",
            "25": "Renting of direct debit box",
            "26": "Travel insurance premium",
            "27": "Subscription fee",
            "29": "Information charges",
            "31": "Writ service fee",
            "33": "Miscellaneous fees and commissions",
            "35": "Costs",
            "37": "Access right to database",
            "39": "Surety fee",
            "41": "Research costs",
            "43": "Printing of forms",
            "45": "Documentary credit charges",
            "47": "Charging fees for transactions",
            "49": "Cancellation or correction",
            "99": "Cancellation or correction",
        }
    ),
}

CATEGORIES = Codebook(
    {
        "000": "Net amount",
        "001": "Interest received",
        "002": "Interest paid",
        "003": "Credit commision",
        "004": "Postage",
        "005": "Renting of letterbox",
        "006": "Various fees/commissions",
        "007": "Access right to database",
        "008": "Information charges",
        "009": "Travelling expenses",
        "010": "Writ service fee",
        "011": "VAT",
        "012": "Exchange commission",
        "013": "Payment commission",
        "014": "Collection commission",
        "015": "Correspondent charges",
        "016": "Negative interest",
        "017": "Research costs",
        "018": "Tental guarantee charges",
        "019": "Tax on physical delivery",
        "020": "Costs of physical delivery",
        "021": "Costs for drawing up a bank cheque",
        "022": "Priority costs",
        "023": "Exercising fee",
        "024": "Growth premium",
        "025": "Individual entry for exchange charges",
        "026": "Handling commission",
        "027": "Charges for unpaid bills",
        "028": "Fidelity premium",
        "029": "Protest charges",
        "030": "Account insurance",
        "031": "Charges foreign cheque",
        "032": "Drawing up a circular cheque",
        "033": "Charges for a foreign bill",
        "034": "Reinvestment fee",
        "035": "Charges foreign documentary bill",
        "036": "Costs relating to a refused cheque",
        "037": "Commission for handling charges",
        "039": "Telecommunications",
        "041": "Credit card costs",
        "042": "Payment card costs",
        "043": "Insurance costs",
        "045": "Handling costs",
        "047": "Charges extension bill",
        "049": "Fiscal stamps/stamp duty",
        "050": "Capital term investment",
        "051": "Withholding tax",
        "052": "",
        "053": "Printing of forms",
        "055": "Repayment loan or credit capital",
        "057": "Interest subsidy",
        "058": "Capital premium",
        "059": "Default interest",
        "061": "Charging fees for transactions",
        "063": "Rounding differences",
        "065": "Interest payment advice",
        "066": "Fixed loan advance – reimbursement",
        "067": "Fixed loan advance - extension",
        "068": "Countervalue of an entry",
        "069": "Forward arbitrage contracts: sum to be supplied by customer",
        "070": "Forward arbitrage contracts: sum to be supplied by bank",
        "071": "Fixed loan advance - availability",
        "072": "Countervalue of commission to third party",
        "073": "Costs of ATM abroad",
        "074": "Mailing costs",
        "100": "Gross amount",
        "200": "Overall documentary credit charges",
        "201": "Advice notice commission",
        "202": "Advising commission\nAdditional advising commission",
        "203": "\n".join(
            [
                "Confirmation fee",
                "Additional confirmation fee",
                "Commitment fee",
                "Flat fee",
                "Confirmation reservation commission",
                "Additional reservation commission",
            ]
        ),
        "204": "Amendment fee",
        "205": "\n".join(
            [
                "Documentary payment commission",
                "Document commission",
                "Drawdown fee",
                "Negotiation fee",
            ]
        ),
        "206": "Surety fee/payment under reserve",
        "207": "Non-conformity fee",
        "208": "Commitment fee deferred payment",
        "209": "Transfer commission",
        "210": "Commitment fee",
        "211": "Credit arrangement fee\nAdditional credit arrangement fee",
        "212": "Warehousing fee",
        "213": "Financing fee",
        "214": "Issue commission (delivery order)",
        "400": "Acceptance fee",
        "401": "Visa charges",
        "402": "Certification costs",
        "403": "Minimum discount rate",
        "404": "Discount commission",
        "405": "Bill guarantee commission",
        "406": "Collection charges",
        "407": "Costs Article 45",
        "408": "Cover commission",
        "409": "Safe deposit charges",
        "410": "Reclamation charges",
        "411": "Fixed collection charge",
        "412": "Advice of expiry charges",
        "413": "Acceptance charges",
        "414": "Regularisation charges",
        "415": "Surety fee",
        "416": "Charges for the deposit of security",
        "418": "Endorsement commission",
        "419": "Bank service fee",
        "420": "Retention charges",
        "425": "Foreign broker's commission",
        "426": "Belgian broker's commission",
        "427": "Belgian Stock Exchange tax",
        "428": "Interest accrued",
        "429": "Foreign Stock Exchange tax",
        "430": "Recovery of foreign tax",
        "431": "Delivery of a copy",
        "435": "Tax on physical securities",
        "436": "Supplementary tax",
        "437": "Speculation tax",
        "438": "Securities account tax",
    }
)

# Card schemes differ per structured communication type.
CARD_SCHEMES = Codebook(
    {
        1: "Bancontact/Mister Cash",
        2: "Maestro",
        3: "Private",
        5: "TINA",
        9: "Other",
    }
)
ATM_POS_CARD_SCHEMES = Codebook(
    {1: "Bancontact/Mister Cash", 2: "Maestro", 3: "Private", 5: "TINA"}
)
CASH_DEPOSIT_CARD_SCHEMES = Codebook({3: "Private", 9: "Other"})

POS_GLOBALISATION_TRANSACTION_TYPES = Codebook(
    {
        0: "Cumulative",
        1: "Withdrawal",
        2: "Cumulative on network",
        5: "POS others",
        7: "Distribution sector",
        8: "Teledata",
        9: "Fuel",
    }
)
ATM_POS_TRANSACTION_TYPES = Codebook(
    {
        1: "Withdrawal",
        2: "Proton loading",
        3: "Reimbursement Proton balance",
        4: "Reversal of purchases",
        5: "POS others",
        7: "Distribution sector",
        8: "Teledata",
        9: "Fuel",
    }
)
POS_INDIVIDUAL_TRANSACTION_TYPES = Codebook(
    {
        1: "Withdrawal",
        5: "POS others",
        7: "Distribution sector",
        8: "Teledata",
        9: "Fuel",
    }
)

PRODUCT_CODES = Codebook(
    {
        1: "Premium with lead substitute",
        2: "Europremium",
        3: "Diesel",
        4: "LPG",
        6: "Premium plus 98 oct",
        7: "Regular unleaded",
        8: "Domestic fuel oil",
        9: "Lubricants",
        10: "Petrol",
        11: "Premium 99+",
        12: "Avgas",
        16: "Other types",
    }
)

ISSUING_INSTITUTIONS = Codebook(
    {
        1: "Mastercard",
        2: "Visa",
        3: "American Express",
        4: "Diners Club",
        9: "Other",
    }
)

DIRECT_DEBIT_TYPES = Codebook(
    {
        0: "Unspecified",
        1: "Recurrent",
        2: "One-off",
        3: "1st (Recurrent)",
        4: "Last (Recurrent)",
    }
)
DIRECT_DEBIT_SCHEMES = Codebook({0: "Unspecified", 1: "SEPA core", 2: "SEPA B2B"})
PAYMENT_REASONS = Codebook(
    {
        0: "Paid",
        1: "Technical problem",
        2: "Reason not specified",
        3: "Debtor disagrees",
        4: "Debtor's account problem",
    }
)
R_TRANSACTION_TYPES = Codebook(
    {
        0: "Paid",
        1: "Reject",
        2: "Return",
        3: "Refund",
        4: "Reversal",
        5: "Cancellation",
    }
)

SECURITIES_CODE_TYPES = Codebook(
    {
        "01": "SVM",
        "02": "ISIN (ISO)",
        "04": "Telekurs (Switz.)",
        "05": "Cedol (London)",
        "06": "Cedel (Luxemburg)",
        "07": "Euroclear",
        "08": "Wertpapier (Germany)",
        "09": "EOE (European Options Exchange)",
        "99": "Internal code",
    }
)

COUPON_AMOUNT_TYPES = Codebook({"1": "dividend", "0": "interest"})

MULTIPLE_FILE_CODES = Codebook({"1": "another file is following", "2": "last file"})


def transaction_description(family: str, transaction: str) -> str:
    if family not in TRANSACTIONS:
        return UNKNOWN
    return TRANSACTIONS[family][transaction]
