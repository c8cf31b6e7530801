"""
RepSheet — Кейс (Selection Store)

Компоненти:
- RepertoryCase: набір вибраних рубрик з множниками важливості
- SelectedRubric: рубрика в кейсі

Приклад використання:
    from rep_sheet.case import RepertoryCase

    case = RepertoryCase()
    case.add_rubric(rubric)
    case.set_importance(rubric.id, 2)
"""

from .session import RepertoryCase, SelectedRubric


__all__ = [
    "RepertoryCase",
    "SelectedRubric",
]
