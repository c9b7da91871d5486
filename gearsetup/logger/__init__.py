"""Logging package for gearsetup."""

from gearsetup.logger.base_logger import AlgorithmLogger
from gearsetup.logger.table_logger import TableLogger
from gearsetup.logger.matrix_logger import MatrixLogger
from gearsetup.logger.combined_logger import Logger
from gearsetup.logger.formatting import (
    format_set,
    format_weight,
    format_vertex,
    format_selection,
)

# Shared singleton for solver tracing
gs_logger = Logger("GearSetup")
gs_logger.disabled = True

__all__ = [
    "AlgorithmLogger",
    "TableLogger",
    "MatrixLogger",
    "Logger",
    "gs_logger",
    "format_set",
    "format_weight",
    "format_vertex",
    "format_selection",
]
