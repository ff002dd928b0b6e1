"""Turns a probability vector into a ranked detection result."""

from typing import List, Sequence

import numpy as np

from core.catalog import CONDITION_CATALOG, Condition
from core.errors import InvalidDistributionError
from core.utils import DetectionResult, RankedCondition


def to_percent(probability: float) -> float:
    """Scale a probability to 0-100 with one decimal place."""
    return round(float(probability) * 100, 1)


class ConditionClassifier:
    """Maps model output positions onto the condition catalog."""

    def __init__(self, catalog: Sequence[Condition] = CONDITION_CATALOG, top_k: int = 3):
        self._catalog = tuple(catalog)
        self._top_k = top_k

    def classify(self, probabilities: Sequence[float]) -> DetectionResult:
        """Pick the most probable condition.

        Ties go to the lowest index. Non-finite entries are never selected.
        The runner-up conditions are attached as additional_conditions.
        """
        ranked = self.rank(probabilities, self._top_k)
        best = ranked[0]
        return DetectionResult(
            disease=best.name,
            confidence=best.confidence,
            description=best.description,
            additional_conditions=ranked[1:],
        )

    def rank(self, probabilities: Sequence[float], top_k: int = 3) -> List[RankedCondition]:
        """Return the top_k conditions, highest confidence first."""
        values = np.asarray(probabilities, dtype=np.float64).reshape(-1)
        if values.shape[0] != len(self._catalog):
            raise InvalidDistributionError(
                f"Expected {len(self._catalog)} probabilities, got {values.shape[0]}"
            )

        finite = np.flatnonzero(np.isfinite(values))
        if finite.size == 0:
            raise InvalidDistributionError("Probability vector has no finite maximum")

        # Stable sort keeps equal probabilities in index order
        order = finite[np.argsort(-values[finite], kind="stable")]

        ranked = []
        for index in order[:max(1, top_k)]:
            condition = self._catalog[int(index)]
            ranked.append(RankedCondition(
                name=condition.name,
                confidence=to_percent(values[index]),
                description=condition.description,
            ))
        return ranked
