import pytest
from unittest.mock import MagicMock, patch

from common.providers.sandbox import factory as sandbox_factory


@pytest.fixture(autouse=True)
def clear_sandbox_registry(monkeypatch):
    """Give every unit test an empty sandbox registry."""
    monkeypatch.setattr(sandbox_factory, "_sandboxes", {})


@pytest.fixture
def mock_span():
    """Create a mock span instance for testing telemetry."""
    span = MagicMock()
    span.__enter__ = MagicMock(return_value=span)
    span.__exit__ = MagicMock(return_value=None)
    return span


@pytest.fixture
def mock_start_span(mock_span):
    """Create a mock start_span function that returns mock_span."""
    with patch(
        "common.core.otel_axiom_exporter.axiom_tracer.start_as_current_span",
        return_value=mock_span,
    ) as mock:
        yield mock
