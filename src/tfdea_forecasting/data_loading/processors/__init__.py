from .dataset_cleaner import DatasetCleaner

__all__ = ["DatasetCleaner"]
