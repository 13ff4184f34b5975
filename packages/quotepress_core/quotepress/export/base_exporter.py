"""
Base exporter for quotes and estimations.

Provides common functionality for all exporters.
"""

from typing import Any, Dict, List, Optional, Union
from pathlib import Path
import logging

from ..exceptions import ExportError
from ..models import Document, Settings

logger = logging.getLogger(__name__)


class BaseExporter:
    """
    Base class for all exporters.
    """

    format_name = ""
    file_extension = ""

    def __init__(self, document: Document, settings: Optional[Settings] = None,
                 output_path: Optional[Union[str, Path]] = None,
                 export_options: Optional[Dict[str, Any]] = None):
        """
        Initialize base exporter.

        Args:
            document: Document to export
            settings: Branding and paging settings (defaults if omitted)
            output_path: Output path for export file
            export_options: Export options
        """
        self.document = document
        self.settings = settings or Settings()
        self.output_path = output_path
        self.export_options = export_options or {}

    def get_export_option(self, key: str, default: Any = None) -> Any:
        return self.export_options.get(key, default)

    def get_supported_formats(self) -> List[str]:
        return [self.format_name]

    def get_export_info(self) -> Dict[str, Any]:
        """
        Get export information.

        Returns:
            Export information dictionary
        """
        return {
            'format': self.format_name.upper(),
            'extension': self.file_extension,
            'doc_id': self.document.doc_id,
            'items': len(self.document.items),
            'options': dict(self.export_options),
        }

    def default_file_name(self) -> str:
        """File name derived from the document id, as downloads are named."""
        return f"{self.document.doc_id or 'document'}{self.file_extension}"

    def export_to_bytes(self) -> bytes:
        """
        Export document to bytes.

        Returns:
            Exported content as bytes
        """
        raise NotImplementedError("Subclasses must implement export_to_bytes")

    def export_to_file(self, file_path: Optional[Union[str, Path]] = None) -> Path:
        """
        Export document to file.

        Args:
            file_path: Output file path (uses output_path if not provided)

        Returns:
            Path of the written file
        """
        path = self._resolve_output_path(file_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(self.export_to_bytes())
        except OSError as e:
            logger.error(f"Failed to write {self.format_name} file {path}: {e}")
            raise ExportError(f"Failed to write {self.format_name} file", str(e)) from e

        logger.info(f"{self.format_name.upper()} exported to {path}")
        return path

    def _resolve_output_path(self, file_path: Optional[Union[str, Path]]) -> Path:
        if file_path is None:
            file_path = self.output_path
        if file_path is None:
            raise ExportError("No output path specified")
        return Path(file_path)
