import pytest

from assignment_pdf.metrics import FontMetrics


@pytest.fixture
def metrics():
    return FontMetrics()


@pytest.fixture
def measure(metrics):
    return metrics.measurer("Times-Roman", 12)
