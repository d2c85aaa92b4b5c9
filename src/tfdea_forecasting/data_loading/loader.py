"""
Load a Dataset of decision making units from a local file or a URL.
"""

import logging
from typing import Any

import pandas as pd
from pydantic import ValidationError

from tfdea_forecasting.config import config
from tfdea_forecasting.data_loading.models import LoadOptions, SourceKind
from tfdea_forecasting.data_loading.processors import DatasetCleaner
from tfdea_forecasting.data_loading.sources import create_source
from tfdea_forecasting.errors import ErrorCategory, Outcome

logger = logging.getLogger(__name__)


def load(
    source_kind: str | SourceKind,
    location: Any = None,
    has_column_header: bool = False,
    has_row_header: bool = False,
    separator: str | None = None,
    quote_char: str | None = None,
) -> Outcome[pd.DataFrame]:
    """
    Retrieve and clean a Dataset.

    Args:
        source_kind: local, google, dropbox or anything else for the default reader
        location: File path, file-like object or URL
        has_column_header: First line holds column names
        has_row_header: First column holds unique row names
        separator: Field separator, defaults to the configured separator
        quote_char: Quote character, empty for none

    Returns:
        Outcome wrapping the Dataset. On failure the value is an empty DataFrame, so
        callers can check the row count instead of the error.
    """
    loading = config.data_loading
    try:
        options = LoadOptions(
            has_column_header=has_column_header,
            has_row_header=has_row_header,
            separator=loading.default_separator if separator is None else separator,
            quote_char=loading.default_quote_char if quote_char is None else quote_char,
        )
    except ValidationError as e:
        return Outcome.failure(
            pd.DataFrame(), ErrorCategory.RETRIEVAL, f"Invalid file options: {str(e)}"
        )

    source = create_source(source_kind, location, options)
    raw = source.read()
    if not raw.ok:
        return raw

    cleaned = DatasetCleaner(raw.value, has_row_header=options.has_row_header).clean()
    if cleaned.ok:
        logger.info(
            f"Loaded {len(cleaned.value)} rows with {len(cleaned.value.columns)} columns"
        )
    return cleaned
