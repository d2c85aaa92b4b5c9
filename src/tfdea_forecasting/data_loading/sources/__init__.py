from typing import Any

from tfdea_forecasting.data_loading.models import LoadOptions, SourceKind

from .base import DataSource, read_delimited
from .file_sources import DefaultSource, LocalFileSource
from .url_sources import DirectUrlSource, SharingLinkSource


def create_source(
    kind: str | SourceKind, location: Any, options: LoadOptions | None = None
) -> DataSource:
    """Pick the retrieval strategy for a source kind."""
    source_kind = SourceKind.parse(kind)
    match source_kind:
        case SourceKind.LOCAL:
            return LocalFileSource(location, options)
        case SourceKind.GOOGLE:
            return SharingLinkSource(location, options)
        case SourceKind.DROPBOX:
            return DirectUrlSource(location, options)
        case _:
            return DefaultSource(location, options)


__all__ = [
    "DataSource",
    "DefaultSource",
    "DirectUrlSource",
    "LocalFileSource",
    "SharingLinkSource",
    "create_source",
    "read_delimited",
]
