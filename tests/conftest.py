"""Спільні фікстури тестів"""

import pytest

from rep_sheet.schemas import RubricResult


def make_rubric(rubric_id, path, remedies):
    """
    Побудувати RubricResult у форматі сервісу пошуку.

    remedies: список (abbrev, weight) або (abbrev, long_name, weight)
    """
    weighted = []
    for item in remedies:
        if len(item) == 2:
            abbrev, weight = item
            long_name = f"{abbrev} long" if abbrev else None
        else:
            abbrev, long_name, weight = item
        weighted.append({
            "remedy": {"nameAbbrev": abbrev, "nameLong": long_name},
            "weight": weight,
        })

    return RubricResult.model_validate({
        "rubric": {"id": rubric_id, "fullPath": path},
        "weightedRemedies": weighted,
    })


@pytest.fixture
def rubric_factory():
    return make_rubric


@pytest.fixture
def rubric_a():
    """A: X:3, Y:2"""
    return make_rubric("A", "Mind > Anxiety > evening", [("X", 3), ("Y", 2)])


@pytest.fixture
def rubric_b():
    """B: X:1, Y:4"""
    return make_rubric("B", "Generals > Thirst > small quantities", [("X", 1), ("Y", 4)])


@pytest.fixture
def rubric_c():
    """C: Ars.:4, Calc.:2, X:2"""
    return make_rubric(
        "C",
        "Sleep > Restless",
        [("Ars.", "Arsenicum album", 4), ("Calc.", "Calcarea carbonica", 2), ("X", 2)]
    )
