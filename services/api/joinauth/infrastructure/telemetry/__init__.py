from opentelemetry import trace as otel_trace, metrics as otel_metrics
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.exporter.otlp.proto.grpc.metric_exporter import OTLPMetricExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import PeriodicExportingMetricReader
import os
from joinauth.common.config import AppConfig

METRICS_EXPORT_INTERVAL_MS = 15000


def _worker_resource(config: AppConfig) -> Resource:
    '''Every gunicorn worker reports as its own instance'''
    pid = os.getpid()
    return Resource.create({
        "service.name": config.OTEL_SERVICE_NAME,
        "service.version": config.GIT_COMMIT,
        "deployment.environment": config.MODE,
        "process.pid": pid,
        "service.instance.id": f"worker-{pid}",
    })


def _install_providers(config: AppConfig) -> None:
    resource = _worker_resource(config)

    tracer_provider = TracerProvider(resource=resource)
    tracer_provider.add_span_processor(
        BatchSpanProcessor(OTLPSpanExporter(endpoint=config.OTEL_GRPC_ENDPOINT, insecure=True))
    )
    otel_trace.set_tracer_provider(tracer_provider)

    reader = PeriodicExportingMetricReader(
        exporter=OTLPMetricExporter(endpoint=config.OTEL_GRPC_ENDPOINT, insecure=True),
        export_interval_millis=METRICS_EXPORT_INTERVAL_MS,
    )
    otel_metrics.set_meter_provider(MeterProvider(resource=resource, metric_readers=[reader]))


def setup_opentelemetry(app, config: AppConfig, engine=None):
    """OTLP/gRPC export of traces and metrics plus auto-instrumentation.
    Only called when OTEL_ENABLED=1."""
    _install_providers(config)

    FastAPIInstrumentor.instrument_app(app, exclude_spans=['receive', 'send'])
    #Log records get otelTraceID/otelSpanID, the JSON formatter reads the span directly
    LoggingInstrumentor().instrument(set_logging_format=False)
    if engine is not None:
        SQLAlchemyInstrumentor().instrument(engine=engine.sync_engine)
