"""
Input/Output Manager (JSON)
Handles saving and loading pages to .json project files and writing exports.
"""
import logging
import os
from typing import Tuple, Union

from pagebuilder.config import EXPORT_BASENAME, EXPORT_EXTENSIONS, PROJECT_ENCODING
from pagebuilder.export import ExportFormat, render
from pagebuilder.export.json_format import parse_json
from pagebuilder.export.registry import resolve_format
from pagebuilder.model.elements import Document, FeatureConfig

# Get module logger
logger = logging.getLogger(__name__)


class IOManager:

    @staticmethod
    def save_project(document: Document, config: FeatureConfig, filepath: str) -> None:
        logger.info(f"Saving project to: {filepath}")
        try:
            text = render(document, config, ExportFormat.JSON)
            with open(filepath, "w", encoding=PROJECT_ENCODING) as f:
                f.write(text)
            logger.info(f"Project saved to: {filepath} ({len(document)} component(s))")

        except Exception as e:
            logger.exception(f"Failed to save project: {e}")
            raise e

    @staticmethod
    def load_project(filepath: str) -> Tuple[Document, FeatureConfig]:
        logger.info(f"Loading project from: {filepath}")
        if not os.path.isfile(filepath):
            msg = f"Project file '{filepath}' does not exist."
            logger.error(msg)
            raise FileNotFoundError(msg)

        try:
            with open(filepath, "r", encoding=PROJECT_ENCODING) as f:
                document, config = parse_json(f.read())
            logger.info(f"Project loaded from: {filepath} ({len(document)} component(s))")
            return document, config

        except Exception as e:
            logger.exception(f"Failed to load project: {e}")
            raise e

    # ---- EXPORT HELPERS ----
    @staticmethod
    def export_filename(fmt: Union[ExportFormat, str]) -> str:
        """File name offered for download, e.g. ``my-page.tsx``."""
        fmt = resolve_format(fmt)
        return f"{EXPORT_BASENAME}.{EXPORT_EXTENSIONS[fmt.value]}"

    @staticmethod
    def export_to_file(
        document: Document,
        config: FeatureConfig,
        fmt: Union[ExportFormat, str],
        parent_dir: str,
    ) -> str:
        """
        Renders the page and writes it into `parent_dir`.
        Returns the path of the written file.
        """
        os.makedirs(parent_dir, exist_ok=True)
        filepath = os.path.join(parent_dir, IOManager.export_filename(fmt))

        text = render(document, config, fmt)
        try:
            with open(filepath, "w", encoding=PROJECT_ENCODING) as f:
                f.write(text)
            logger.info(f"Exported {resolve_format(fmt)} to: {filepath}")
        except Exception:
            logger.exception("Failed to write export file")
            raise

        return filepath
