import logging

import pandas as pd

from tfdea_forecasting.errors import ErrorCategory, Outcome

logger = logging.getLogger(__name__)


class DatasetCleaner:
    """
    Processor that turns freshly read delimited data into a Dataset.

    After cleaning the data only contains complete rows, has no duplicated rows and,
    when requested, uses its first column as unique row names.
    """

    def __init__(self, data: pd.DataFrame, has_row_header: bool = False):
        self.data = data
        self.has_row_header = has_row_header
        self.rows_with_missing_values = 0
        self.duplicated_rows = 0

    def clean(self) -> Outcome[pd.DataFrame]:
        """
        Apply the cleaning steps in order.

        Returns:
            Outcome wrapping the cleaned DataFrame, or an empty DataFrame and a data
            error when nothing usable is left.
        """
        # Rows with a missing value in any column are dropped, even in columns
        # that are never selected for a model.
        df = self.data.dropna(how="any")
        self.rows_with_missing_values = len(self.data) - len(df)
        if self.rows_with_missing_values > 0:
            logger.info(f"Removed {self.rows_with_missing_values} rows with missing values")

        if len(df) == 0:
            return Outcome.failure(
                pd.DataFrame(),
                ErrorCategory.DATA,
                "Data cannot be found at specified location or chosen parameters not correct",
            )

        if self.has_row_header and len(df.columns) > 1:
            row_names = df.iloc[:, 0]
            if row_names.duplicated().any():
                return Outcome.failure(
                    pd.DataFrame(),
                    ErrorCategory.DATA,
                    "Duplicated row names, deselect row header check box",
                )
            df = df.set_index(df.columns[0])

        unique_df = df.drop_duplicates(keep="first")
        self.duplicated_rows = len(df) - len(unique_df)
        if self.duplicated_rows > 0:
            logger.info(f"Removed {self.duplicated_rows} duplicated rows")

        return Outcome(unique_df)
