"""
RepSheet — Експорт

Компоненти:
- serialize_case: детермінований текст реперторного листа
- export_filename, rubric_paths_text, rubric_summary: допоміжні формати
- write_export: запис у файл (ExportWriteError при збої)
"""

from .text_export import (
    ExportMetadata,
    serialize_case,
    export_filename,
    rubric_paths_text,
    rubric_summary,
    write_export,
)


__all__ = [
    "ExportMetadata",
    "serialize_case",
    "export_filename",
    "rubric_paths_text",
    "rubric_summary",
    "write_export",
]
