"""
모니터링 시스템
로깅 기능 제공
"""

from .logger import LoggerAdapter, get_logger, setup_logging, setup_logging_from_settings

__all__ = [
    "setup_logging",
    "setup_logging_from_settings",
    "get_logger",
    "LoggerAdapter",
]
