from .otel_tracer import OTELTracer

#Swap here to trace with another backend
TracerType = OTELTracer
