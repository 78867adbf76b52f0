"""
Shared test configuration for article extraction.

Provides HTML fixtures modelled on real article pages and a parsing helper.
"""

from typing import Callable

import pytest
from article_extractor.dom import Document

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests across modules")


# ============================================================================
# HTML Fixtures
# ============================================================================

SIMPLE_ARTICLE_HTML = """
<!DOCTYPE html>
<html>
<head>
    <title>Test Article - Test Site</title>
    <meta property="og:title" content="Test Article">
    <meta name="author" content="John Doe">
</head>
<body>
    <header>
        <nav>Navigation</nav>
    </header>
    <article>
        <h1>Test Article Title</h1>
        <p class="byline">By John Doe</p>
        <p>This is the first paragraph of the article. It contains enough text to be considered meaningful content for extraction purposes. We need to have substantial content here.</p>
        <p>This is the second paragraph with more content. The extractor should be able to identify this as the main content area based on the scoring algorithm that evaluates text density and structure.</p>
        <p>The third paragraph continues the article with additional information. Good articles typically have multiple paragraphs with substantial content that tells a complete story.</p>
    </article>
    <aside>
        <h3>Related Articles</h3>
        <ul>
            <li><a href="#">Link 1</a></li>
            <li><a href="#">Link 2</a></li>
        </ul>
    </aside>
    <footer>Footer content</footer>
</body>
</html>
"""

DIV_ARTICLE_HTML = """
<!DOCTYPE html>
<html>
<head><title>Div Article</title></head>
<body>
    <div class="content">
        <div class="article-body">
            <p>First paragraph of the div-based article. This should be detected as content despite being nested in divs rather than an article element.</p>
            <p>Second paragraph with more information. The scoring algorithm should recognize this div as containing the main content based on text density.</p>
            <p>Third paragraph to ensure we have enough content for proper extraction and testing of the algorithm.</p>
        </div>
    </div>
    <div class="sidebar">
        <a href="#">Link 1</a>
        <a href="#">Link 2</a>
        <a href="#">Link 3</a>
    </div>
</body>
</html>
"""

NAV_ONLY_HTML = """
<!DOCTYPE html>
<html>
<head><title>Empty Page</title></head>
<body>
    <nav>Navigation only</nav>
</body>
</html>
"""

SCHEMA_ARTICLE_HTML = """
<!DOCTYPE html>
<html>
<head>
    <title>Schema.org Article</title>
    <script type="application/ld+json">
    {
        "@type": "Article",
        "headline": "Schema Article Title",
        "author": {"@type": "Person", "name": "Jane Smith"},
        "datePublished": "2024-01-15T10:00:00Z"
    }
    </script>
</head>
<body>
    <article itemscope itemtype="http://schema.org/Article">
        <h1 itemprop="headline">Schema Article Title</h1>
        <p>This is an article with schema.org markup. The extractor should be able to extract metadata from the JSON-LD script and recognize the article structure.</p>
        <p>The second paragraph provides more content for the extraction algorithm to work with. Schema.org markup should boost the confidence score.</p>
        <p>Third paragraph ensures we have adequate content length for successful extraction.</p>
    </article>
</body>
</html>
"""


@pytest.fixture
def simple_article_html() -> str:
    return SIMPLE_ARTICLE_HTML


@pytest.fixture
def div_article_html() -> str:
    return DIV_ARTICLE_HTML


@pytest.fixture
def nav_only_html() -> str:
    return NAV_ONLY_HTML


@pytest.fixture
def schema_article_html() -> str:
    return SCHEMA_ARTICLE_HTML


@pytest.fixture
def parse() -> Callable[[str], Document]:
    """Parse an HTML string into a Document with the default parser."""

    def _parse(html: str) -> Document:
        return Document(html)

    return _parse
