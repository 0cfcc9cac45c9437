"""Shared fixtures for visualization tests.

This module provides:
1. HAS_PLAYWRIGHT constant for skip decorators
2. Shared Playwright helpers (page fixture, temp file handling)
3. Extraction helpers that read drawn geometry back out of the browser
"""

import os
import tempfile

import pytest

# =============================================================================
# Playwright Detection
# =============================================================================

try:
    import playwright  # noqa: F401
    HAS_PLAYWRIGHT = True
except ImportError:
    HAS_PLAYWRIGHT = False


# =============================================================================
# Playwright Fixtures
# =============================================================================

@pytest.fixture(scope="module")
def _playwright_instance():
    """Shared Playwright instance for the test module."""
    if not HAS_PLAYWRIGHT:
        pytest.skip("playwright not installed")

    from playwright.sync_api import sync_playwright
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="module")
def _browser(_playwright_instance):
    """Shared browser instance for the test module."""
    browser = _playwright_instance.chromium.launch(headless=True)
    yield browser
    browser.close()


@pytest.fixture
def page(_browser):
    """Create a Playwright page for testing."""
    page = _browser.new_page()
    yield page
    page.close()


@pytest.fixture
def temp_html_file():
    """Create a temporary HTML file for a diagram snapshot.

    Yields the file path, cleans up after test.
    """
    with tempfile.NamedTemporaryFile(suffix=".html", delete=False) as f:
        temp_path = f.name
    yield temp_path
    if os.path.exists(temp_path):
        os.unlink(temp_path)


# =============================================================================
# Extraction Helpers
# =============================================================================

_EXTRACT_JS = """
() => {
    const svg = document.querySelector('#diagram svg');
    const origin = svg.getBoundingClientRect();
    const nodes = {};
    for (const g of svg.querySelectorAll('g.node')) {
        const box = g.querySelector('rect').getBoundingClientRect();
        nodes[g.dataset.id] = {
            x: box.left - origin.left + box.width / 2,
            y: box.top - origin.top + box.height / 2,
        };
    }
    const lines = [];
    for (const line of svg.querySelectorAll('line.connection')) {
        lines.push({
            source: line.dataset.source,
            target: line.dataset.target,
            x1: line.x1.baseVal.value,
            y1: line.y1.baseVal.value,
            x2: line.x2.baseVal.value,
            y2: line.y2.baseVal.value,
            classes: Array.from(line.classList),
        });
    }
    return {nodes, lines};
}
"""


def extract_geometry(page) -> dict:
    """Node box centres (relative to the SVG) and line endpoints as laid out by the browser."""
    return page.evaluate(_EXTRACT_JS)
