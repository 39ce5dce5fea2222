# MainArgs Switch Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for MainArgs."""
import logging

logger: logging.Logger = logging.getLogger("mainargs")
