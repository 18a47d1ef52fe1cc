#!/usr/bin/env python3

WIDTH = 128

HEADER = (
    "0000018011520105        0938409934CODELICIOUS               GEBABEBB   "
    "09029308273 00001          984309          834080       2"
)
OLD_BALANCE = (
    "10155001548226815 EUR0BE                  0000000004004100241214CODELICIOUS"
    "               PROFESSIONAL ACCOUNT               255"
)
NEW_BALANCE = (
    "8225001548226815 EUR0BE                  1000000500012100120515"
    "                                                                0"
)
MOVEMENT_1 = (
    "21000100000001200002835        0000000001767820251214001120000112/4554/46812"
    "   813                                 25121421401 0"
)
MOVEMENT_2 = (
    "2200010000  ANOTHER MESSAGE                                           54875"
    "                       GEBCEEBB                   1 0"
)
MOVEMENT_3 = (
    "2300010000BE54805480215856                  EURBVBA.BAKKER PIET"
    "                         MESSAGE                              0 1"
)
INFORMATION_1 = (
    "31000100010007500005482        004800001001BVBA.BAKKER PIET"
    "                                                                  1 0"
)
INFORMATION_2 = (
    "3200010001MAIN STREET 928                    5480 SOME CITY"
    "                                                                  0 0"
)
INFORMATION_3 = (
    "3300010001SOME INFORMATION ABOUT THIS TRANSACTION"
    "                                                                            0 0"
)
FREE_COMMUNICATION = (
    "4 00010005                      THIS IS A PUBLIC MESSAGE"
    "                                                                       0"
)
TRAILER = (
    "9               000015000000016837520000000003967220"
    "                                                                           1"
)


def make_line(*fields: tuple[int, str]) -> str:
    """Blank 128 column line with each `(offset, text)` written in place."""
    chars = [" "] * WIDTH
    for offset, text in fields:
        chars[offset : offset + len(text)] = text
    line = "".join(chars)
    assert len(line) == WIDTH, line
    return line


def movement_line(
    sequence: str = "0001",
    detail: str = "0000",
    reference: str = "0001200002835",
    sign: str = "0",
    amount: str = "000000001767820",
    code: str = "00112000",
    kind: str = "0",
    communication: str = "",
    entry_date: str = "251214",
    next_code: str = "0",
) -> str:
    return make_line(
        (0, "21"),
        (2, sequence),
        (6, detail),
        (10, reference),
        (31, sign),
        (32, amount),
        (47, "251214"),
        (53, code),
        (61, kind),
        (62, communication),
        (115, entry_date),
        (121, "214"),
        (124, "0"),
        (125, next_code),
        (127, "0"),
    )


def movement_2_line(
    sequence: str = "0001",
    detail: str = "0000",
    communication: str = "",
    bic: str = "GEBABEBB",
    next_code: str = "0",
) -> str:
    return make_line(
        (0, "22"),
        (2, sequence),
        (6, detail),
        (10, communication),
        (98, bic),
        (125, next_code),
        (127, "0"),
    )


def movement_3_line(
    sequence: str = "0001",
    detail: str = "0000",
    account: str = "BE54805480215856                  EUR",
    name: str = "BVBA.BAKKER PIET",
    communication: str = "",
    next_code: str = "0",
) -> str:
    return make_line(
        (0, "23"),
        (2, sequence),
        (6, detail),
        (10, account),
        (47, name),
        (82, communication),
        (125, next_code),
        (127, "0"),
    )


def information_line(
    sequence: str = "0001",
    detail: str = "0001",
    reference: str = "0001200002835",
    code: str = "00112000",
    kind: str = "0",
    communication: str = "",
    next_code: str = "0",
) -> str:
    return make_line(
        (0, "31"),
        (2, sequence),
        (6, detail),
        (10, reference),
        (31, code),
        (39, kind),
        (40, communication),
        (125, next_code),
        (127, "0"),
    )


def information_2_line(
    sequence: str = "0001",
    detail: str = "0001",
    communication: str = "",
    next_code: str = "0",
) -> str:
    return make_line(
        (0, "32"),
        (2, sequence),
        (6, detail),
        (10, communication),
        (125, next_code),
        (127, "0"),
    )


def free_communication_line(
    sequence: str = "0001", detail: str = "0000", text: str = "", link_code: str = "0"
) -> str:
    return make_line(
        (0, "4"),
        (2, sequence),
        (6, detail),
        (32, text),
        (127, link_code),
    )


def statement(*body: str) -> str:
    return "\n".join([HEADER, OLD_BALANCE, *body, NEW_BALANCE, TRAILER]) + "\n"

