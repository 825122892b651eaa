# Just Getopt — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Just Getopt."""
import logging

logger: logging.Logger = logging.getLogger("just_getopt")
