from metaflow import FlowSpec, step

from tfdea_forecasting.config import BatchForecastConfig, config
from tfdea_forecasting.session import AnalysisSession


class ForecastFlow(FlowSpec):
    """
    A Metaflow flow that loads a DMU dataset, runs a TFDEA or linear regression
    forecast and exports the result tables.

    The run is configured through environment variables (DATA_FILE, INPUTS, OUTPUTS,
    INTRO_DATE, FRONTIER_DATE, METHOD and the optional TFDEA options).
    """

    @step
    def start(self) -> None:
        """
        This is the entry point for the Metaflow pipeline. It validates the
        environment and begins the forecast.
        """
        print("🚀 Starting Forecast Flow...")

        self.settings = BatchForecastConfig()
        if not self.settings.data_file:
            raise ValueError("DATA_FILE environment variable is required")
        if not self.settings.intro_date:
            raise ValueError("INTRO_DATE environment variable is required")
        if self.settings.frontier_date is None:
            raise ValueError("FRONTIER_DATE environment variable is required")

        print(f"📁 Data file: {self.settings.data_file}")
        self.session = AnalysisSession()
        self.next(self.load_data)

    @step
    def load_data(self) -> None:
        """
        Load and clean the dataset.
        """
        settings = self.settings
        dataset = self.session.load_data(
            settings.source_kind,
            settings.data_file,
            has_column_header=settings.has_column_header,
            has_row_header=settings.has_row_header,
            separator=settings.separator,
            quote_char=settings.quote_char,
        )
        if dataset.empty:
            raise ValueError(f"Error loading data: {self.session.errors.message}")

        print(f"✅ Loaded {len(dataset)} DMUs with {len(dataset.columns)} columns")
        self.next(self.select_columns)

    @step
    def select_columns(self) -> None:
        """
        Report the columns that can be used as inputs and outputs.
        """
        options = self.session.options
        if options is None:
            raise ValueError(f"Error selecting columns: {self.session.errors.message}")

        print(f"📋 Numeric columns: {', '.join(options.intro_date)}")
        self.next(self.forecast)

    @step
    def forecast(self) -> None:
        """
        Run the selected forecast method.
        """
        settings = self.settings
        if settings.method == "lr":
            result = self.session.run_lr(
                settings.inputs, settings.outputs, settings.intro_date, settings.frontier_date
            )
        else:
            result = self.session.run_tfdea(
                settings.inputs,
                settings.outputs,
                settings.intro_date,
                settings.frontier_date,
                **settings.tfdea_params,
            )

        if result is None:
            raise ValueError(f"Error running forecast: {self.session.errors.message}")

        self.summary = result.summary
        print(f"✅ {settings.method.upper()} forecast completed:")
        for column, value in result.summary.iloc[0].items():
            print(f"  • {column}: {value}")

        self.next(self.export)

    @step
    def export(self) -> None:
        """
        Write the result tables to a workbook.
        """
        path = self.session.export_results(config.results_path or config.results_file)
        if path is None:
            raise ValueError(f"Error exporting results: {self.session.errors.message}")

        print(f"💾 Results saved to {path}")
        self.next(self.end)

    @step
    def end(self) -> None:
        """
        End step: Flow completed.
        """
        print("Forecast flow completed.")


def main() -> None:
    ForecastFlow()


if __name__ == "__main__":
    main()
