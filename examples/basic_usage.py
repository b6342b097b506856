#!/usr/bin/env python3
"""
Basic Usage Example - Array Helpers

This script walks through the public helpers:
- Percentages of a sum, with and without normalization
- Percentages of an explicit base
- Field-based difference and membership of record lists
- Merging mappings

Run: python examples/basic_usage.py
"""

from dataclasses import dataclass

from array_helpers import (
    PercentageCalculator,
    diff_object_array_by_field,
    merge,
    object_in_array_by_field,
    percents,
    percents_of_base,
)
from array_helpers.config.defaults import PercentageParams
from array_helpers.logging import configure_logging


@dataclass
class Respondent:
    id: int
    answer: str


def main():
    configure_logging(level="DEBUG")

    votes = {"yes": 1, "no": 1, "abstain": 1}
    print("1. Vote shares")
    print(f"   raw:        {percents(votes, normalized=False)}")
    print(f"   normalized: {percents(votes)}")
    print()

    print("2. Share of a fixed quota of 200")
    print(f"   {percents_of_base(200, {'north': 50, 'south': 75})}")
    print()

    calculator = PercentageCalculator(PercentageParams(accuracy=1))
    print("3. One decimal place")
    print(f"   {calculator.percents({'a': 2, 'b': 2, 'c': 2})}")
    print()

    invited = [Respondent(1, "yes"), Respondent(2, "no"), Respondent(3, "yes")]
    answered = [Respondent(2, "no")]
    print("4. Respondents who have not answered")
    for respondent in diff_object_array_by_field(invited, answered, "id"):
        print(f"   {respondent}")
    print(f"   respondent 2 answered: {object_in_array_by_field(Respondent(2, ''), answered, 'id')}")
    print()

    print("5. Merging settings")
    print(f"   {merge({'accuracy': 0, 'tags': ['a']}, {'accuracy': 2, 'tags': ['b']})}")


if __name__ == "__main__":
    main()
