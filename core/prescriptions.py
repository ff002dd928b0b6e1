"""Resolves a detected condition to its treatment record."""

import logging
from typing import Mapping, Optional

from core.catalog import CONDITIONS_BY_NAME, Condition
from core.errors import MissingPrescriptionError, UnknownConditionError
from core.treatments import PRESCRIPTION_TABLE
from core.utils import Prescription

logger = logging.getLogger(__name__)


class PrescriptionResolver:
    """Looks up treatment records by condition display name.

    Both tables are immutable, so every call reads them directly.
    """

    def __init__(
        self,
        conditions: Optional[Mapping[str, Condition]] = None,
        table: Optional[Mapping[str, Prescription]] = None,
    ):
        self._conditions = CONDITIONS_BY_NAME if conditions is None else conditions
        self._table = PRESCRIPTION_TABLE if table is None else table

    def resolve(self, condition_name: str) -> Prescription:
        """Return the prescription for a condition display name."""
        condition = self._conditions.get(condition_name)
        if condition is None:
            raise UnknownConditionError(f"Unknown condition: {condition_name!r}")

        prescription = self._table.get(condition.id)
        if prescription is None:
            logger.error("Catalog entry %s has no treatment record", condition.id)
            raise MissingPrescriptionError(
                f"No prescription for condition {condition.id!r}"
            )
        return prescription
