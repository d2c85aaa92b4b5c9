import logging
import os
from typing import IO, Any

import pandas as pd

from tfdea_forecasting.data_loading.models import LoadOptions
from tfdea_forecasting.errors import ErrorCategory, Outcome

from .base import DataSource, read_delimited

logger = logging.getLogger(__name__)

FileLocation = str | os.PathLike | IO[Any]


class LocalFileSource(DataSource):
    """
    Reads an uploaded or local delimited text file.
    """

    def __init__(self, location: FileLocation | None, options: LoadOptions | None = None):
        self.location = location
        self.options = options or LoadOptions()

    def read(self) -> Outcome[pd.DataFrame]:
        if self.location is None:
            return Outcome.failure(
                pd.DataFrame(),
                ErrorCategory.RETRIEVAL,
                "No File Chosen. Select a csv file using the 'Choose File' button",
            )

        try:
            logger.info(f"Reading local file {self.location}")
            return Outcome(read_delimited(self.location, self.options))
        except Exception as e:
            return Outcome.failure(
                pd.DataFrame(),
                ErrorCategory.RETRIEVAL,
                f"Error accessing local file: {str(e)}",
            )


class DefaultSource(DataSource):
    """
    Fallback reader for any path or URL pandas can open.
    """

    def __init__(self, location: FileLocation | None, options: LoadOptions | None = None):
        self.location = location
        self.options = options or LoadOptions()

    def read(self) -> Outcome[pd.DataFrame]:
        try:
            if self.location is None:
                raise ValueError("no location given")
            logger.info(f"Reading {self.location}")
            return Outcome(read_delimited(self.location, self.options))
        except Exception as e:
            return Outcome.failure(
                pd.DataFrame(),
                ErrorCategory.RETRIEVAL,
                f"Error accessing file: {str(e)}",
            )
