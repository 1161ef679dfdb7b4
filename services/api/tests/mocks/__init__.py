from .hasher import FakeHasher, AsyncHasherAdapter
from .mail import FakeMailSender, FailingMailSender
from .traces import DummySpanContext, DummySpan, DummyTraceProvider
