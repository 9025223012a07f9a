"""
Pytest configuration for odd-even tests.
"""


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "property: marks Hypothesis property-based tests"
    )
