"""Select the range splitter for a field type."""

from shardsplit.core.constants import (
    DATE_FIELD_TYPES,
    FLOATING_FIELD_TYPES,
    INTEGRAL_FIELD_TYPES,
)
from shardsplit.core.exceptions import InvalidSplitRequestError
from shardsplit.interfaces.field_splitter import FieldTypeSplitter

from .range_splitter import date_splitter, float_splitter, int_splitter


def create_field_splitter(field_type: str) -> FieldTypeSplitter:
    """Create the splitter for ``field_type`` (e.g. "long", "pdouble", "date").

    Raises:
        InvalidSplitRequestError: If no splitter handles the field type
    """
    normalized = field_type.strip().lower()
    if normalized in INTEGRAL_FIELD_TYPES:
        return int_splitter(normalized)
    if normalized in FLOATING_FIELD_TYPES:
        return float_splitter(normalized)
    if normalized in DATE_FIELD_TYPES:
        return date_splitter(normalized)
    raise InvalidSplitRequestError(
        f"Unsupported split field type: {field_type!r}. Supported: "
        f"{', '.join(sorted(INTEGRAL_FIELD_TYPES | FLOATING_FIELD_TYPES | DATE_FIELD_TYPES))}"
    )
