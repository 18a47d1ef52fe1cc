#!/usr/bin/env python3

from __future__ import annotations

import logging
from collections.abc import Sequence

from beancount_import_coda.models import Information, Movement

logger = logging.getLogger(__name__)


def link_information(
    movements: Sequence[Movement], information: Sequence[Information]
) -> list[Information]:
    """Attach information entities to the movements they describe.

    The key is `(sequence, reference_number)`. An information entity is
    appended to every movement with that key and left out of the returned
    list, which holds the entities that matched nothing.
    """
    unlinked = []
    for detail in information:
        matches = [
            movement
            for movement in movements
            if detail.reference_number is not None
            and (movement.sequence, movement.reference_number)
            == (detail.sequence, detail.reference_number)
        ]
        if not matches:
            unlinked.append(detail)
            continue
        if len(matches) > 1:
            logger.debug(
                f"Information {detail.sequence}/{detail.detail_sequence} matches "
                f"{len(matches)} movements"
            )
        for movement in matches:
            logger.debug(
                f"Linking information {detail.sequence}/{detail.detail_sequence} "
                f"to movement {movement.sequence}/{movement.detail_sequence}"
            )
            movement.information.append(detail)
    return unlinked
