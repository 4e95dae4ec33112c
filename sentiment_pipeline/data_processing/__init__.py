"""
Subpackage for reading and writing tabular data.

Each module handles one aspect of moving rows in and out of the
classifier: record types, spreadsheet sources and sinks, and text
helpers.
"""

__all__ = [
    "records",
    "tabular",
    "utils",
]
