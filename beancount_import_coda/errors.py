#!/usr/bin/env python3


class CodaError(ValueError):
    """Base class for structural errors that abort decoding a document."""


class UnknownRecordType(CodaError):
    def __init__(self, line: str) -> None:
        self.record_type = line[:1]
        super().__init__(f"Unknown record type {self.record_type!r} in line {line!r}")


class UnknownCommunicationType(CodaError):
    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(
            f"Unknown communication type {flag!r}, expected '0' (unstructured) "
            "or '1' (structured)"
        )


class UnknownCommunicationStructureType(CodaError):
    def __init__(self, side: str, structure_type: str) -> None:
        self.side = side
        self.structure_type = structure_type
        super().__init__(
            f"Unknown structured {side} communication type {structure_type!r}"
        )


UnknownStructuredCommunicationType = UnknownCommunicationStructureType


class UnknownDateFormat(CodaError):
    def __init__(self, value: str, reason: str = "unsupported length") -> None:
        self.value = value
        super().__init__(f"Unknown date format {value!r}: {reason}")


class UnknownAccountStructure(CodaError):
    def __init__(self, structure) -> None:
        self.structure = structure
        super().__init__(
            f"Unknown account structure {structure!r}, expected one of 0, 1, 2, 3"
        )


class TruncatedContinuationChain(UserWarning):
    """Category of the warning logged when input ends inside a chain."""
