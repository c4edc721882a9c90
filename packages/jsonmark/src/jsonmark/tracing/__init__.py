# jsonmark/tracing/__init__.py
from .tracing import get_tracer, codec_span

__all__ = [
    "get_tracer",
    "codec_span",
]
