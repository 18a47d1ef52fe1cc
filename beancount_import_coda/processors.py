#!/usr/bin/env python3
"""Rule hooks that refine the TXN of an imported movement.

Rules come from a YAML file whose nested keys form the identifier (an account
name or `meta_key:meta_value`) and whose leaves are lists of
`{txn_field: regex}` dicts. All regexes of one dict must match.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from collections import defaultdict
from collections.abc import Sequence
from copy import deepcopy
from functools import wraps

import yaml
from beancount.core import flags

from beancount_import_coda.importers import CodaImporter
from beancount_import_coda.models import TXN, Document, InducedPosting, Movement

logger = logging.getLogger(__name__)

RuleSets = dict[str, Sequence[dict[str, str]]]


class TXNHook(ABC):
    def __init__(self, rule_sets: RuleSets) -> None:
        self.rule_sets = rule_sets

    @classmethod
    def from_yaml(cls, fname) -> TXNHook:
        with open(fname) as f:
            rule_sets = flatten_dict(yaml.safe_load(f))
        validate_rule_sets(rule_sets)
        return cls(rule_sets=rule_sets)

    def matches(self, rule: dict[str, str], txn: TXN) -> list[re.Match] | None:
        found = []
        for field_name, pattern in rule.items():
            if field_name not in txn.__dict__:
                raise ValueError(
                    f"Unknown field {field_name!r} in rule, expected one of "
                    f"{list(txn.__dict__)}"
                )
            match = re.search(pattern, str(getattr(txn, field_name)), re.IGNORECASE)
            if not match:
                return None
            found.append(match)
        return found

    def __call__(self, original_txn: TXN) -> TXN:
        txn = deepcopy(original_txn)
        for identifier, rule_set in self.rule_sets.items():
            for rule in rule_set:
                found = self.matches(rule, txn)
                if found is not None:
                    logger.debug(f"{type(self).__name__} rule {rule} matched")
                    self.augment(identifier=identifier, matches=found, txn=txn)
        return txn

    @abstractmethod
    def augment(self, identifier: str, matches: list[re.Match], txn: TXN) -> None:
        ...


def validate_rule_sets(rule_sets) -> None:
    for identifier, rule_set in rule_sets.items():
        if not isinstance(identifier, str):
            raise TypeError(f"{identifier=} was not of type `str`")
        if not isinstance(rule_set, list):
            raise TypeError(f"{rule_set=} for {identifier=} was not of type `list`")
        for rule in rule_set:
            if not isinstance(rule, dict):
                raise TypeError(f"{rule=} was not of type `dict`")
            for field_name, regex in rule.items():
                if not isinstance(field_name, str):
                    raise TypeError(f"{field_name=} was not of type `str`")
                if not isinstance(regex, str):
                    raise TypeError(f"{regex=} was not of type `str`")


def patch_hooks(importer: CodaImporter, hooks: Sequence[TXNHook]) -> CodaImporter:
    original_movement_to_txn = importer.movement_to_txn

    @wraps(original_movement_to_txn)
    def patched_movement_to_txn(movement: Movement, document: Document) -> TXN:
        txn = original_movement_to_txn(movement, document)
        for i, hook in enumerate(hooks, start=1):
            logger.debug(f"Processing hook {type(hook).__name__} {i}/{len(hooks)}")
            txn = hook(txn)
        return txn

    importer.movement_to_txn = patched_movement_to_txn  # type: ignore
    return importer


class AccountProcessor(TXNHook):
    """Adds a flagged, amount-less posting to the account named by the rule."""

    def augment(self, identifier: str, matches: list[re.Match], txn: TXN) -> None:
        txn.induced_postings.append(
            InducedPosting(flag=flags.FLAG_WARNING, account=identifier)
        )


class MetaProcessor(TXNHook):
    """Sets metadata and rewrites TXN fields from named regex groups.

    The identifier is either `key`, with the value taken from the `meta`
    group of the matches, or `key:value`. Other named groups replace the
    TXN field of the same name.
    """

    def augment(self, identifier: str, matches: list[re.Match], txn: TXN) -> None:
        key, _, value = identifier.partition(":")
        if ":" in value:
            raise ValueError(
                f"Identifier {identifier!r} is nested too deep, expected "
                "`meta_key` or `meta_key:meta_value`"
            )
        if value:
            meta_values = [value]
        else:
            meta_values = [
                match.group("meta") for match in matches if "meta" in match.groupdict()
            ]

        allowed_fields = [f for f, v in txn.__dict__.items() if isinstance(v, str)]
        replacements = defaultdict(list)
        for match in matches:
            for group, text in match.groupdict().items():
                if group == "meta" or text is None:
                    continue
                if group not in allowed_fields:
                    raise ValueError(
                        f"Named group {group!r} is not a text field of the "
                        f"transaction, expected one of {allowed_fields}"
                    )
                replacements[group].append(text.strip())
        for group, texts in replacements.items():
            setattr(txn, group, " ".join(texts))

        if key and meta_values:
            txn.meta[key] = " ".join(meta_values).upper()


def flatten_dict(dd, separator=":", prefix=""):
    return (
        {
            prefix + separator + k if prefix else k: v
            for kk, vv in dd.items()
            for k, v in flatten_dict(vv, separator, kk).items()
        }
        if isinstance(dd, dict)
        else {prefix: dd}
    )
