# src/wof_folders/loader/__init__.py

"""
Public interface for the WOF loader stack.

    from wof_folders.loader import (
        DataSource,
        discover_sources,
        load_documents,
        normalize_documents,
    )
"""

from __future__ import annotations

from .documents import DocumentShape, document_shape, expand_document, normalize_documents
from .file_scanner import ScanResult, iter_source_files, load_documents, read_document
from .sources import DataSource, admin_country_code, discover_sources


__all__ = [
    "DocumentShape",
    "document_shape",
    "expand_document",
    "normalize_documents",
    "ScanResult",
    "iter_source_files",
    "load_documents",
    "read_document",
    "DataSource",
    "admin_country_code",
    "discover_sources",
]
