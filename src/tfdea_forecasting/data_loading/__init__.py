from .columns import ColumnOptions, column_options, numeric_columns
from .loader import load
from .models import LoadOptions, SourceKind
from .processors import DatasetCleaner
from .sources import (
    DataSource,
    DefaultSource,
    DirectUrlSource,
    LocalFileSource,
    SharingLinkSource,
    create_source,
)

__all__ = [
    "ColumnOptions",
    "DataSource",
    "DatasetCleaner",
    "DefaultSource",
    "DirectUrlSource",
    "LoadOptions",
    "LocalFileSource",
    "SharingLinkSource",
    "SourceKind",
    "column_options",
    "create_source",
    "load",
    "numeric_columns",
]
