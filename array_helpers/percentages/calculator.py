"""Configured front-end for the percentage calculations"""

from collections.abc import Mapping
from typing import Any, Optional

from ..config.defaults import PercentageParams, get_default_config
from ..config.loader import ConfigLoader
from .calculations import normalize, percents, percents_of_base


class PercentageCalculator:
    """
    Percentage calculator bound to a set of PercentageParams

    Every method accepts an optional per-call accuracy; everything else
    comes from the parameters given at construction.
    """

    def __init__(self, params: Optional[PercentageParams] = None):
        self.params = params or get_default_config().percentages

    @classmethod
    def from_loader(cls, loader: Optional[ConfigLoader] = None,
                    overrides: Optional[dict[str, Any]] = None) -> "PercentageCalculator":
        """Create a calculator from validated settings."""
        loader = loader or ConfigLoader.create()
        return cls(loader.load_params(overrides))

    def percents_of_base(self, base: float, values: Mapping[Any, float],
                         accuracy: Optional[int] = None) -> dict[Any, float]:
        return percents_of_base(
            base,
            values,
            self._accuracy(accuracy),
            rounding=self.params.rounding,
            zero_base=self.params.zero_base,
        )

    def percents(self, values: Mapping[Any, float], accuracy: Optional[int] = None,
                 normalized: Optional[bool] = None) -> dict[Any, float]:
        if normalized is None:
            normalized = self.params.normalize

        return percents(
            values,
            self._accuracy(accuracy),
            normalized,
            rounding=self.params.rounding,
            zero_base=self.params.zero_base,
        )

    def normalize(self, values: Mapping[Any, float], accuracy: Optional[int] = None) -> dict[Any, float]:
        return normalize(values, self._accuracy(accuracy), rounding=self.params.rounding)

    def _accuracy(self, accuracy: Optional[int]) -> int:
        return self.params.accuracy if accuracy is None else accuracy
