from .csv_export import CSV_HEADER, runs_to_csv, export_filename, staged_export

__all__ = [
    "CSV_HEADER",
    "runs_to_csv",
    "export_filename",
    "staged_export",
]
