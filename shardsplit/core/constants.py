"""Core constants for shardsplit."""

# Field types with a built-in range splitter
INTEGRAL_FIELD_TYPES = frozenset({"int", "long", "pint", "plong", "tint", "tlong"})
FLOATING_FIELD_TYPES = frozenset({"float", "double", "pfloat", "pdouble", "tfloat", "tdouble"})
DATE_FIELD_TYPES = frozenset({"date", "pdate", "tdate"})
