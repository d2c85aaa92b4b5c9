import csv
import logging
from urllib.parse import quote

import pandas as pd

from tfdea_forecasting.config import config
from tfdea_forecasting.data_loading.models import LoadOptions
from tfdea_forecasting.errors import ErrorCategory, Outcome

from .base import DataSource, read_delimited

logger = logging.getLogger(__name__)


class SharingLinkSource(DataSource):
    """
    Reads a shared spreadsheet through its CSV export.

    The sharing link must contain the spreadsheet key after `key=`; the sheet index
    after `#gid=` is optional and defaults to the first sheet. Only rows whose first
    column is non-empty are exported.
    """

    def __init__(self, url: str | None, options: LoadOptions | None = None):
        self.url = url or ""
        self.options = options or LoadOptions()

    def parse_link(self) -> tuple[str, str] | None:
        """
        Split the sharing link into spreadsheet key and sheet index.

        Returns:
            (key, gid) or None when the link has no key segment
        """
        url_split = self.url.split("key=", 1)
        if len(url_split) < 2:
            return None

        key_split = url_split[1].split("#gid=", 1)
        file_key = key_split[0]
        file_gid = key_split[1] if len(key_split) > 1 else "0"
        return file_key, file_gid

    def export_url(self, file_key: str, file_gid: str) -> str:
        """Build the CSV export URL for one sheet of the spreadsheet."""
        loading = config.data_loading
        select_query = quote(loading.spreadsheet_select_query, safe="")
        return (
            f"{loading.spreadsheet_export_url}?tqx=out:csv&tq={select_query}"
            f"&key={file_key}&gid={file_gid}"
        )

    def read(self) -> Outcome[pd.DataFrame]:
        link = self.parse_link()
        if link is None:
            return Outcome.failure(
                pd.DataFrame(),
                ErrorCategory.RETRIEVAL,
                "Google spreadsheet URL does not include a key (key=)",
            )

        file_url = self.export_url(*link)
        try:
            logger.info(f"Reading spreadsheet export {file_url}")
            # The export is always comma separated with double quotes
            return Outcome(
                read_delimited(
                    file_url,
                    self.options,
                    sep=",",
                    quotechar='"',
                    quoting=csv.QUOTE_MINIMAL,
                )
            )
        except Exception as e:
            return Outcome.failure(
                pd.DataFrame(),
                ErrorCategory.RETRIEVAL,
                f"Error accessing Google spreadsheet: {str(e)}",
            )


class DirectUrlSource(DataSource):
    """
    Reads delimited text served directly at a URL (e.g. a Dropbox share).
    """

    def __init__(self, url: str | None, options: LoadOptions | None = None):
        self.url = url
        self.options = options or LoadOptions()

    def read(self) -> Outcome[pd.DataFrame]:
        try:
            if not self.url:
                raise ValueError("no URL given")
            logger.info(f"Reading {self.url}")
            return Outcome(read_delimited(self.url, self.options))
        except Exception as e:
            return Outcome.failure(
                pd.DataFrame(),
                ErrorCategory.RETRIEVAL,
                f"Error accessing Dropbox file: {str(e)}",
            )
