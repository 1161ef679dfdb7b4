import logging, sys
from pythonjsonlogger.json import JsonFormatter
from opentelemetry import trace

PLAIN_FORMAT = "[%(asctime)s] %(levelname)-8s | %(name)s | %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


class OTLPJsonFormatter(JsonFormatter):
    '''One JSON object per line, stamped with pid and the active trace/span ids'''

    def __init__(self, *args, trace_provider=None, **kwargs):
        '''trace_provider is injectable so the formatter can be tested without OpenTelemetry'''
        super().__init__(*args, **kwargs)
        self._trace_provider = trace_provider or trace

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['pid'] = record.process
        context = self._trace_provider.get_current_span().get_span_context()
        if context.is_valid:
            log_record['trace_id'] = format(context.trace_id, '032x')
            log_record['span_id'] = format(context.span_id, '016x')


def build_formatter(json_logs: bool, service: str, env: str) -> logging.Formatter:
    if not json_logs:
        return logging.Formatter(PLAIN_FORMAT, datefmt="%H:%M:%S")
    return OTLPJsonFormatter(
        JSON_FORMAT,
        rename_fields={'levelname': 'level', 'name': 'logger'},
        static_fields={'service': service, 'env': env},
    )


def configure_logger(name: str, stream=sys.stdout, json_logs: bool = False, service: str = 'joinauth', env: str = 'Local build'):
    handler = logging.StreamHandler(stream)
    handler.setFormatter(build_formatter(json_logs, service, env))

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    logger.handlers = [handler]
    return logger


def init_loggers(json_logs: bool = False, service: str = 'joinauth', env: str = 'Local build'):
    """Called once per app. 'joinauth.*' children log through the 'joinauth' handler."""
    configure_logger('joinauth', json_logs=json_logs, service=service, env=env).propagate = False
    logging.getLogger('joinauth.storage').setLevel(logging.INFO)

    #Requests are counted by the metrics middleware
    access_logger = logging.getLogger("uvicorn.access")
    access_logger.handlers = []
    access_logger.propagate = False
