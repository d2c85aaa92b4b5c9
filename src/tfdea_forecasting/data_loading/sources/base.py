import logging
from typing import Any, Protocol

import pandas as pd

from tfdea_forecasting.data_loading.models import LoadOptions
from tfdea_forecasting.errors import Outcome

logger = logging.getLogger(__name__)


class DataSource(Protocol):
    """
    Protocol defining the interface for dataset sources.
    This is a structural type that defines the expected behavior
    of any retrieval strategy (local file, sharing link, direct URL).
    """

    def read(self) -> Outcome[pd.DataFrame]:
        """
        Retrieve and parse the raw delimited data.

        Returns:
            Outcome wrapping the parsed DataFrame, exactly as read (no cleaning).

        Note:
            - Returns an empty DataFrame with a retrieval error if the source cannot
              be reached or parsed
            - Implementations should handle errors gracefully and not raise exceptions
        """
        ...


def read_delimited(target: Any, options: LoadOptions, **overrides: Any) -> pd.DataFrame:
    """
    Parse delimited text from a path, URL or file-like object.

    Columns of header-less data are named V1..Vn.
    """
    params = {**options.to_read_csv_params(), **overrides}
    df = pd.read_csv(target, **params)

    if not options.has_column_header:
        df.columns = [f"V{i + 1}" for i in range(len(df.columns))]
    else:
        df.columns = [str(col) for col in df.columns]

    logger.info(f"Read {len(df)} rows with {len(df.columns)} columns")
    return df
