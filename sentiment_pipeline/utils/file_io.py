"""File input/output helper functions."""

import logging
import os
from pathlib import Path

import pandas as pd

from ..errors import EmptySource, MalformedSource, MissingSource, SinkWriteFailure

EXCEL_SUFFIXES = (".xlsx", ".xlsm")
CSV_SUFFIXES = (".csv",)
JSON_SUFFIXES = (".json",)


def read_table(path, role="source"):
    """Read the first sheet of a spreadsheet (or a CSV file) into a DataFrame.

    The first row is treated as a header.  Cell values are kept as
    written; empty cells read as empty strings.
    """
    path = Path(path)
    if not path.is_file():
        logging.error("%s file not found: %s", role.capitalize(), path)
        raise MissingSource(path, role)
    suffix = path.suffix.lower()
    if suffix not in EXCEL_SUFFIXES + CSV_SUFFIXES:
        raise MalformedSource(f"Unsupported {role} format: {path.name}")
    try:
        with path.open("rb") as fh:
            if suffix in EXCEL_SUFFIXES:
                df = pd.read_excel(fh, sheet_name=0, engine="openpyxl", keep_default_na=False)
            else:
                df = pd.read_csv(fh, keep_default_na=False)
    except pd.errors.EmptyDataError:
        raise EmptySource(path, role) from None
    except Exception as exc:
        logging.error("Failed to read %s file %s: %s", role, path, exc)
        raise MalformedSource(f"Unreadable {role} file {path}: {exc}") from exc
    if df.empty:
        raise EmptySource(path, role)
    return df


def check_output_format(path):
    """Return `path` as a Path, or raise `SinkWriteFailure` if its suffix cannot be written."""
    path = Path(path)
    if path.suffix.lower() not in EXCEL_SUFFIXES + CSV_SUFFIXES + JSON_SUFFIXES:
        raise SinkWriteFailure(f"Unsupported output format: {path.name}")
    return path


def write_table(df, path, sheet_name="Sheet1"):
    """Write a DataFrame to ``.xlsx``, ``.csv`` or ``.json`` by file suffix.

    The frame is written to a temporary sibling file first and moved
    over `path` only once complete.
    """
    path = check_output_format(path)
    suffix = path.suffix.lower()
    partial = path.with_name(f".{path.stem}.partial{path.suffix}")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if suffix in EXCEL_SUFFIXES:
            with pd.ExcelWriter(partial, engine="openpyxl") as writer:
                df.to_excel(writer, sheet_name=sheet_name, index=False)
        elif suffix in CSV_SUFFIXES:
            df.to_csv(partial, index=False)
        else:
            df.to_json(partial, orient="records", force_ascii=False, indent=2)
        os.replace(partial, path)
    except Exception as exc:
        logging.error("Failed to write output file %s: %s", path, exc)
        partial.unlink(missing_ok=True)
        raise SinkWriteFailure(f"Could not write output file {path}: {exc}") from exc
