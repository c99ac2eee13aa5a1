"""Field-type range splitters."""

from .factory import create_field_splitter
from .range_splitter import RangeFieldSplitter, date_splitter, float_splitter, int_splitter

__all__ = [
    "RangeFieldSplitter",
    "create_field_splitter",
    "date_splitter",
    "float_splitter",
    "int_splitter",
]
