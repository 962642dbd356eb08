"""
Filter Criteria — Pure update and query functions over FilterCriteria values.

Criteria are frozen models: every update returns a new value and the input is
never touched. Flags are addressed by (category, key) where key is the
dashboard identifier ('upTo1min'); the snake_case field name is accepted too.
"""

from __future__ import annotations

from proctorview.core.errors import InvalidFilterKey
from proctorview.models.filter_models import (
    FLAG_FIELDS,
    FLAG_LABELS,
    ActiveLabel,
    FilterCategory,
    FilterCriteria,
)


def default() -> FilterCriteria:
    """A fresh criteria value with every flag off."""
    return FilterCriteria()


# "Clear all filters" is just a return to the default value
clear = default


def resolve_category(category: str | FilterCategory) -> FilterCategory:
    try:
        return FilterCategory(category)
    except ValueError:
        raise InvalidFilterKey(str(category)) from None


def resolve_key(category: str | FilterCategory, key: str) -> tuple[FilterCategory, str]:
    """
    Normalize a (category, key) pair to (FilterCategory, dashboard key).

    Raises:
        InvalidFilterKey: if either part is unrecognized.
    """
    cat = resolve_category(category)
    fields = FLAG_FIELDS[cat]
    if key in fields:
        return cat, key
    for dashboard_key, field_name in fields.items():
        if key == field_name:
            return cat, dashboard_key
    raise InvalidFilterKey(cat.value, key)


def set_flag(
    criteria: FilterCriteria,
    category: str | FilterCategory,
    key: str,
    value: bool,
) -> FilterCriteria:
    """Return a copy of criteria with exactly one flag replaced."""
    cat, dashboard_key = resolve_key(category, key)
    group = getattr(criteria, cat.value)
    field_name = FLAG_FIELDS[cat][dashboard_key]
    new_group = group.model_copy(update={field_name: bool(value)})
    return criteria.model_copy(update={cat.value: new_group})


def set_category_all(
    criteria: FilterCriteria,
    category: str | FilterCategory,
    value: bool,
) -> FilterCriteria:
    """Return a copy of criteria with every flag of one category set to value."""
    cat = resolve_category(category)
    group = getattr(criteria, cat.value)
    new_group = group.model_copy(
        update={field_name: bool(value) for field_name in FLAG_FIELDS[cat].values()}
    )
    return criteria.model_copy(update={cat.value: new_group})


def active_keys(criteria: FilterCriteria, category: str | FilterCategory) -> list[str]:
    """Dashboard keys of the flags that are on within one category, in display order."""
    cat = resolve_category(category)
    group = getattr(criteria, cat.value)
    return [key for key, field_name in FLAG_FIELDS[cat].items() if getattr(group, field_name)]


def is_category_active(criteria: FilterCriteria, category: str | FilterCategory) -> bool:
    """True iff at least one flag in the category is on. Read-only."""
    return bool(active_keys(criteria, category))


def count_active(criteria: FilterCriteria) -> int:
    return sum(len(active_keys(criteria, cat)) for cat in FilterCategory)


def to_active_labels(criteria: FilterCriteria) -> list[ActiveLabel]:
    """One chip per active flag, ordered by category then flag declaration order."""
    labels: list[ActiveLabel] = []
    for cat in FilterCategory:
        for key in active_keys(criteria, cat):
            labels.append(
                ActiveLabel(category=cat, key=key, label=FLAG_LABELS[(cat, key)])
            )
    return labels


def remove_label(criteria: FilterCriteria, label: ActiveLabel) -> FilterCriteria:
    """Turn off the flag a chip stands for, using its structured (category, key)."""
    return set_flag(criteria, label.category, label.key, False)
