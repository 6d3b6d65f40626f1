from enum import Enum


class FilterOperator(str, Enum):
    """Filter operators understood by the API side of the wire."""

    # Pattern matching
    LIKE = "like"
    LIKE_OR = "likeor"
    LIKE_AND = "likeand"

    # Equality
    EQ = "eq"
    EQ_OR = "eqor"
    EQ_AND = "eqand"

    # Comparison
    GTE = "gte"
    GT = "gt"
    LTE = "lte"
    LT = "lt"

    # Set membership
    IN = "in"
    NOT_IN = "notin"

    # Range
    BETWEEN = "between"

    # Null checks (flat field lists)
    IS_NULL = "isnull"
    IS_NOT_NULL = "isnotnull"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


# field -> list of values; repeated assignment appends
MULTI_VALUE_OPERATORS: frozenset[str] = frozenset(
    {
        FilterOperator.LIKE_OR.value,
        FilterOperator.LIKE_AND.value,
        FilterOperator.EQ_OR.value,
        FilterOperator.EQ_AND.value,
        FilterOperator.IN.value,
        FilterOperator.NOT_IN.value,
    }
)

# field -> [min, max]
RANGE_OPERATORS: frozenset[str] = frozenset({FilterOperator.BETWEEN.value})

# flat list of field names
FIELD_LIST_OPERATORS: frozenset[str] = frozenset(
    {FilterOperator.IS_NULL.value, FilterOperator.IS_NOT_NULL.value}
)
