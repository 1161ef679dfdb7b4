from opentelemetry import trace
import joinauth.infrastructure.interfaces as iabc
import contextlib, typing as t, functools, inspect

F = t.TypeVar("F", bound=t.Callable[..., t.Any])


class OTELTracer(iabc.ITracer):
    """Spans go to whatever tracer provider is installed globally.
    Until setup_opentelemetry() runs they are no-ops."""

    def __init__(self, tracer_name: str = 'joinauth'):
        self._tracer = trace.get_tracer(tracer_name)

    @staticmethod
    @contextlib.contextmanager
    def start_span(name: str):
        with trace.get_tracer('joinauth').start_as_current_span(name) as span:
            yield span

    @staticmethod
    def traced(func: F) -> F:
        tracer = trace.get_tracer(func.__module__)
        span_name = func.__qualname__

        @contextlib.contextmanager
        def recording_span():
            with tracer.start_as_current_span(span_name, record_exception=False) as span:
                try:
                    yield span
                except Exception as e:
                    span.record_exception(e)
                    raise

        if inspect.iscoroutinefunction(func):
            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                with recording_span():
                    return await func(*args, **kwargs)
            return t.cast(F, async_wrapper)

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs):
            with recording_span():
                return func(*args, **kwargs)
        return t.cast(F, sync_wrapper)
