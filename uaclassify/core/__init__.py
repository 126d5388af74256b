"""Core module - models, configuration, and logging."""

from .config import Config, load_config, save_config
from .logging_config import get_logger, log_classification, setup_logging
from .models import (
    CATEGORY_FIELDS,
    SENTINEL,
    Category,
    CategoryRecord,
    ParseResult,
    RuleSetError,
    empty_record,
)

__all__ = [
    # Models
    "SENTINEL",
    "Category",
    "CATEGORY_FIELDS",
    "CategoryRecord",
    "ParseResult",
    "RuleSetError",
    "empty_record",
    # Config
    "Config",
    "load_config",
    "save_config",
    # Logging
    "setup_logging",
    "get_logger",
    "log_classification",
]
