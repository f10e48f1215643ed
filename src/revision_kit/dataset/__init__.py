from .builder import (
    build_dataset,
    build_records,
    extract_head_words,
    extract_tail_words,
    reduce_change_group,
)
from .models import DatasetRecord

__all__ = [
    "DatasetRecord",
    "build_dataset",
    "build_records",
    "extract_head_words",
    "extract_tail_words",
    "reduce_change_group",
]
