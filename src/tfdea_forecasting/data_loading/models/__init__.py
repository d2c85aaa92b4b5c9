from .load_options import LoadOptions, SourceKind

__all__ = ["LoadOptions", "SourceKind"]
