"""
Logging configuration for the hydronic planner.

This module sets up file and console output with different formats and levels.
Library modules only create loggers with ``logging.getLogger(__name__)``; the
handlers are installed once by the application entry point.
"""

import logging
import os
import sys
from datetime import datetime
from typing import Optional


class HydronicPlannerLogger:
    """
    Configures logging for the hydronic planner.

    Supports:
    - Standard levels (CRITICAL, ERROR, WARNING, INFO, DEBUG)
    - Timestamped log file per run
    - Console output with a shorter format
    """

    FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    CONSOLE_FORMAT = '%(name)s - %(levelname)s: %(message)s'

    @staticmethod
    def configure(
        debug_mode: bool = False,
        log_dir: str = "logs",
        log_to_file: bool = True
    ) -> Optional[str]:
        """
        Configure the logging system for the entire application.

        Args:
            debug_mode: If True, sets DEBUG level for all loggers
            log_dir: Directory to store log files
            log_to_file: If False, only the console handler is installed

        Returns:
            Path to the created log file, or None without a file handler
        """
        level = logging.DEBUG if debug_mode else logging.INFO

        root_logger = logging.getLogger()
        root_logger.setLevel(level)

        # Clear any existing handlers
        if root_logger.handlers:
            root_logger.handlers.clear()

        log_file = None
        if log_to_file:
            os.makedirs(log_dir, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = os.path.join(log_dir, f"hydronic_planner_{timestamp}.log")

            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(logging.Formatter(HydronicPlannerLogger.FILE_FORMAT))
            file_handler.setLevel(level)
            root_logger.addHandler(file_handler)

        # Console shows less info by default
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(HydronicPlannerLogger.CONSOLE_FORMAT))
        console_handler.setLevel(level if debug_mode else logging.INFO)
        root_logger.addHandler(console_handler)

        return log_file
