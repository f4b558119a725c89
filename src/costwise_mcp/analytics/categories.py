"""
Category distribution of the item collection.

Items without a category are grouped under a sentinel label.
"""

from typing import Dict, Iterable, List

from .models import UNCATEGORIZED, CategoryStat, Item


def category_distribution(
    items: Iterable[Item],
    uncategorized_label: str = UNCATEGORIZED
) -> List[CategoryStat]:
    """
    Count and cost share of every category.

    Args:
        items: Item collection
        uncategorized_label: Label for items with no category

    Returns:
        One CategoryStat per category, largest total cost first. Percentages
        are relative to the whole collection and 0 when it is empty.
    """
    by_category: Dict[str, Dict[str, float]] = {}
    total_items = 0
    total_cost = 0.0

    for item in items:
        category = item.category_or(uncategorized_label)
        if category not in by_category:
            by_category[category] = {'count': 0, 'cost': 0.0}
        by_category[category]['count'] += 1
        by_category[category]['cost'] += item.total_cost
        total_items += 1
        total_cost += item.total_cost

    result = [
        CategoryStat(
            category=category,
            count=int(data['count']),
            total_cost=data['cost'],
            percentage_of_count=(data['count'] / total_items * 100
                                 if total_items > 0 else 0.0),
            percentage_of_cost=(data['cost'] / total_cost * 100
                                if total_cost > 0 else 0.0)
        )
        for category, data in by_category.items()
    ]
    result.sort(key=lambda s: (-s.total_cost, s.category))
    return result
