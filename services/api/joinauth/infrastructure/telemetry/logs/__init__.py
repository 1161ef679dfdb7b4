from .logging import OTLPJsonFormatter, build_formatter, configure_logger, init_loggers
