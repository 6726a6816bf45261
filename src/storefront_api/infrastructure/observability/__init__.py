from .logger_factory_service import LoggerFactoryService
from .redaction_service import redact_dict, redact_text

__all__ = [
    "LoggerFactoryService",
    "redact_dict",
    "redact_text",
]
