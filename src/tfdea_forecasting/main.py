#!/usr/bin/env python3
"""
Main entry point for the technology forecasting application.

This module provides a command-line interface to the components of the
forecasting pipeline.
"""


def main() -> None:
    """
    Main entry point for the technology forecasting CLI.

    Displays usage information and available commands.
    """
    print("📈 Technology Forecasting (TFDEA / LR)")
    print("=" * 50)
    print()
    print("Available Commands:")
    print("  tfdea-forecast run    - Load a dataset, forecast and export the results")
    print()
    print("Environment Variables:")
    print("  DATA_FILE           - Path or URL of the DMU dataset (required)")
    print("  SOURCE_KIND         - local, google, dropbox or default (default: local)")
    print("  INTRO_DATE          - Introduction date column (required)")
    print("  FRONTIER_DATE       - Frontier date (required)")
    print("  INPUTS / OUTPUTS    - Comma separated column names, Constant_1 allowed")
    print("  METHOD              - tfdea or lr (default: tfdea)")
    print("  RTS, ORIENTATION, SECONDARY_OBJ, FRONTIER_TYPE, SEGMENTED_ROC")
    print("                      - TFDEA options")
    print("  BASE_DATA_PATH      - Directory for the results workbook")
    print("  MAX_UPLOAD_BYTES    - Maximum data file size (default: 10MB)")
    print()
    print("Local Usage:")
    print("  export DATA_FILE='/path/to/dmus.csv' INTRO_DATE='Date' FRONTIER_DATE=2007")
    print("  export INPUTS='Constant_1' OUTPUTS='Speed,Range'")
    print("  tfdea-forecast run")


if __name__ == "__main__":
    main()
