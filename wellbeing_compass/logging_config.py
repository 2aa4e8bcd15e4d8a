import logging
import sys

from pythonjsonlogger import jsonlogger


class CompassJsonFormatter(jsonlogger.JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        if not log_record.get("timestamp"):
            log_record["timestamp"] = record.created
        log_record["level"] = record.levelname
        log_record["module"] = record.module


def setup_logging(log_level_str: str = "INFO"):
    """
    Configures JSON logging on the root logger. Safe to call more than once.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    if not any(isinstance(h.formatter, CompassJsonFormatter) for h in root_logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(CompassJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
        root_logger.addHandler(handler)
