import os
import sys

import pandas as pd

from cell_coercion import is_missing


class RecordSource:
    SUPPORTED = {".json", ".jsonl", ".csv", ".parquet", ".xlsx"}

    def __init__(self, path: str):
        self.path = path
        _, ext = os.path.splitext(path)
        self.ext = ext.lower()

        if self.ext not in self.SUPPORTED:
            print("Unsupported file type (use .json, .jsonl, .csv, .parquet, or .xlsx)")
            sys.exit(1)

    def load(self) -> list[dict]:
        if not os.path.exists(self.path) or os.path.getsize(self.path) == 0:
            return []

        if self.ext == ".json":
            df = pd.read_json(self.path, orient="records", dtype=False)
        elif self.ext == ".jsonl":
            df = pd.read_json(self.path, orient="records", lines=True, dtype=False)
        elif self.ext == ".csv":
            try:
                # cells are opaque text; only truly empty cells are missing
                df = pd.read_csv(
                    self.path, dtype=str, keep_default_na=False, na_values=[""]
                )
            except pd.errors.EmptyDataError:
                return []
        elif self.ext == ".parquet":
            self._ensure_parquet_engine()
            df = pd.read_parquet(self.path)
        else:
            self._ensure_excel_engine()
            df = pd.read_excel(self.path, sheet_name=0)

        return self.to_records(df)

    @staticmethod
    def to_records(df: pd.DataFrame) -> list[dict]:
        """Rows as dicts, leaving out the fields a row has no value for."""
        if df is None or df.shape[1] == 0:
            return []
        records = []
        for row in df.to_dict(orient="records"):
            records.append(
                {str(k): v for k, v in row.items() if not is_missing(v)}
            )
        return records

    def _ensure_parquet_engine(self):
        try:
            import pyarrow  # noqa: F401

            return
        except ImportError:
            pass
        print("Parquet support requires pyarrow. Install via: pip install pyarrow")
        sys.exit(1)

    def _ensure_excel_engine(self):
        try:
            import openpyxl  # noqa: F401

            return
        except ImportError:
            pass
        print("XLSX support requires openpyxl. Install via: pip install openpyxl")
        sys.exit(1)
