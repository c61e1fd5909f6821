# rcconfig — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for rcconfig."""
import logging

logger: logging.Logger = logging.getLogger("rcconfig")
