"""Rating aggregation: per-recipe average and count from raw rating rows."""

import math
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping


@dataclass(frozen=True)
class Aggregate:
    """Average and number of ratings for one recipe. Never persisted."""

    average: float = 0.0
    count: int = 0


EMPTY_AGGREGATE = Aggregate(average=0.0, count=0)


def rating_value(item: Any) -> int:
    """Extract the score from a Rating row, a mapping, or a bare int."""
    if isinstance(item, Mapping):
        return item["rating"] if "rating" in item else item["value"]
    if isinstance(item, int) and not isinstance(item, bool):
        return item
    if hasattr(item, "rating"):
        return item.rating
    return item.value


def rating_recipe_id(item: Any):
    """Extract the recipe id a rating row belongs to."""
    if isinstance(item, Mapping):
        return item["recipe_id"]
    return item.recipe_id


def aggregate(ratings: Iterable[Any]) -> Aggregate:
    """Return the mean and count of the given ratings.

    An empty input yields an average of 0.0, not NaN. No rounding is applied;
    math.fsum keeps the result independent of input order.
    """
    values = [rating_value(item) for item in ratings]
    if not values:
        return EMPTY_AGGREGATE
    return Aggregate(average=math.fsum(values) / len(values), count=len(values))


def aggregate_many(recipe_ids: Iterable[Any], all_ratings: Iterable[Any]) -> Dict[Any, Aggregate]:
    """Aggregate a combined rating list per recipe.

    Every requested recipe id appears in the result, unrated ones as
    Aggregate(0.0, 0). Ratings for recipes that were not requested are ignored.
    """
    partitions = defaultdict(list)
    for item in all_ratings:
        partitions[rating_recipe_id(item)].append(item)
    return {recipe_id: aggregate(partitions.get(recipe_id, ())) for recipe_id in recipe_ids}


def format_rating(average: float) -> str:
    """One-decimal display of an average, e.g. 4.0 -> '4.0'."""
    return f"{average:.1f}"
