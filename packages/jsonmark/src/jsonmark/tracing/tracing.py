import logging
from collections.abc import Mapping, Sequence
from contextlib import contextmanager
from typing import Any, Iterator

from opentelemetry import trace
from opentelemetry.trace import Span, SpanKind, Status, StatusCode, Tracer

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Tracer utilities
# ---------------------------------------------------------------------------

_DEFAULT_TRACER_NAME = "jsonmark"

# OpenTelemetry allows only: bool, str, bytes, int, float, or sequences of those.
_ALLOWED = (bool, str, bytes, int, float)


def get_tracer(name: str | None = None) -> Tracer:
    """Return an OpenTelemetry tracer for this package.

    Without a configured SDK the global provider hands out no-op tracers, so
    spans cost next to nothing until an application opts in.
    """
    return trace.get_tracer(name or _DEFAULT_TRACER_NAME)


def _apply_attributes(span: Span, attrs: Mapping[str, Any] | None) -> None:
    if not attrs:
        return
    for k, v in attrs.items():
        if v is None:
            continue
        if isinstance(v, _ALLOWED):
            span.set_attribute(k, v)
        elif isinstance(v, Sequence) and not isinstance(v, (str, bytes)):
            cleaned = [x for x in v if isinstance(x, _ALLOWED)]
            if cleaned:
                span.set_attribute(k, cleaned)


def _record_exception(span: Span, err: BaseException) -> None:
    try:
        span.record_exception(err)
        span.set_status(Status(StatusCode.ERROR, description=str(err)))
        span.set_attribute("exception.type", type(err).__name__)
    except Exception:  # tracing must never mask the original error
        logger.exception("trace.record_exception_failed")


@contextmanager
def codec_span(name: str, *, attributes: Mapping[str, Any] | None = None) -> Iterator[Span]:
    """Synchronous span around one codec operation.

    Usage:
        with codec_span("jsonmark.stringify", attributes={"jsonmark.types": 8}):
            ...
    """
    tracer = get_tracer()
    with tracer.start_as_current_span(name, kind=SpanKind.INTERNAL, record_exception=False) as span:
        _apply_attributes(span, attributes)
        try:
            yield span
            span.set_attribute("ok", True)
        except Exception as e:
            span.set_attribute("ok", False)
            _record_exception(span, e)
            raise


__all__ = [
    "get_tracer",
    "codec_span",
]
