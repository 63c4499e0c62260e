"""
Core configuration module for Bharat Holidays
Centralized settings management with environment variable support
"""

import os
import sys
from pathlib import Path
from typing import List, Optional, Tuple
from dataclasses import dataclass
from dotenv import load_dotenv
from loguru import logger

# Load environment variables
load_dotenv()

@dataclass
class CatalogConfig:
    """Holiday catalog configuration"""
    default_year: int = 2011
    supported_years: Tuple[int, ...] = (2011, 2012)
    separator: str = "-----------------------------------"

@dataclass
class LoggingConfig:
    """Loguru sink configuration"""
    level: str = "INFO"
    log_file: Optional[Path] = None
    rotation: str = "10 MB"
    retention: str = "30 days"
    format: str = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {module}:{line} - {message}"

class Config:
    """Main configuration class"""

    def __init__(self):
        self.catalog = CatalogConfig()
        self.logging = LoggingConfig()

        # Override with environment variables if present
        self._load_env_overrides()

    def _load_env_overrides(self):
        """Load configuration overrides from environment variables"""
        if os.getenv("BHARAT_HOLIDAYS_LOG_LEVEL"):
            self.logging.level = os.getenv("BHARAT_HOLIDAYS_LOG_LEVEL").upper()

        if os.getenv("BHARAT_HOLIDAYS_LOG_FILE"):
            self.logging.log_file = Path(os.getenv("BHARAT_HOLIDAYS_LOG_FILE"))

# Global configuration instance
config = Config()

def setup_logging(level: Optional[str] = None, log_file: Optional[Path] = None) -> List[int]:
    """
    Replaces the loguru sinks with a stderr sink and an optional rotating file sink.

    Args:
        level (str, optional): Minimum level to emit. Defaults to config.logging.level.
        log_file (Path, optional): File to log to. Defaults to config.logging.log_file.

    Returns:
        List[int]: The loguru handler ids that were added.
    """
    log_cfg = config.logging
    level = (level or log_cfg.level).upper()
    log_file = log_file or log_cfg.log_file

    logger.remove()
    handler_ids = [logger.add(sys.stderr, level=level, format=log_cfg.format)]

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler_ids.append(logger.add(
            str(log_file),
            level="DEBUG",
            format=log_cfg.format,
            rotation=log_cfg.rotation,
            retention=log_cfg.retention,
        ))

    logger.info(f"Logging initialized at level {level}")
    return handler_ids

if __name__ == "__main__":
    # Test configuration
    print("Bharat Holidays Configuration")
    print("=" * 40)
    print(f"Default year: {config.catalog.default_year}")
    print(f"Supported years: {', '.join(str(y) for y in config.catalog.supported_years)}")
    print(f"Log level: {config.logging.level}")
    print(f"Log file: {config.logging.log_file}")
