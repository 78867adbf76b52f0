"""
Unit tests for content cleanup and URL resolution.
"""

import pytest
from article_extractor.extractor.postprocessor import Postprocessor, clean_html, clean_text

DIRTY_HTML = """
<div id="root">
  <p class="lead" style="color: red" data-track="1">Intro <a href="/x" class="btn" onclick="go()">link</a></p>
  <div class="share-bar">Share this</div>
  <div id="related-posts"><a href="/r">Related</a></div>
  <p>Text <a href="/empty"></a> <a href="/img"><img src="a.png" class="wide" alt="A"></a></p>
  <script>track();</script>
  <!-- editor note -->
  <div><span><em></em></span></div>
  <p>   </p>
  <hr>
</div>
"""

BASE_URL = "https://example.com/blog/post.html"


@pytest.fixture
def postprocessor():
    return Postprocessor()


@pytest.fixture
def cleaned(parse, postprocessor):
    root = parse(DIRTY_HTML).select_one("#root")
    return postprocessor.clean(root)


@pytest.mark.unit
class TestClean:
    def test_noise_and_residual_tags_removed(self, cleaned):
        assert cleaned.select_one(".share-bar") is None
        assert cleaned.select_one("#related-posts") is None
        assert cleaned.find("script") is None
        assert "editor note" not in str(cleaned)

    def test_empty_links_removed_but_image_links_kept(self, cleaned):
        hrefs = [a.get("href") for a in cleaned.find_all("a")]
        assert hrefs == ["/x", "/img"]
        assert cleaned.find("img") is not None

    def test_attributes_stripped_to_allow_list(self, cleaned):
        assert cleaned.find("p").attrs == {}
        assert cleaned.find("a").attrs == {"href": "/x"}
        assert cleaned.find("img").attrs == {"src": "a.png", "alt": "A"}

    def test_empty_elements_removed_recursively(self, cleaned):
        assert cleaned.find("em") is None
        assert cleaned.find("span") is None
        assert cleaned.find("div") is None
        assert len(cleaned.find_all("p")) == 2

    def test_void_elements_preserved(self, cleaned):
        assert cleaned.find("hr") is not None

    def test_idempotent(self, cleaned, postprocessor):
        first = clean_html(cleaned)
        postprocessor.clean(cleaned)
        assert clean_html(cleaned) == first

    def test_deep_empty_chain(self, parse, postprocessor):
        chain = "<div>" * 30 + "</div>" * 30
        root = parse(f"<section id='root'><p>Keep me</p>{chain}</section>").select_one("#root")
        postprocessor.clean(root)
        assert root.find("div") is None
        assert clean_text(root) == "Keep me"


@pytest.mark.unit
class TestResolveUrls:
    @pytest.mark.parametrize(
        "href, expected",
        [
            ("img.png", "https://example.com/blog/img.png"),
            ("/about", "https://example.com/about"),
            ("//cdn.example.com/x.png", "https://cdn.example.com/x.png"),
            ("https://other.org/a", "https://other.org/a"),
            ("mailto:me@example.com", "mailto:me@example.com"),
            ("../up", "https://example.com/up"),
        ],
    )
    def test_anchor_resolution(self, parse, postprocessor, href, expected):
        root = parse(f"<div id='root'><a href='{href}'>x</a></div>").select_one("#root")
        postprocessor.resolve_urls(root, BASE_URL)
        assert root.find("a")["href"] == expected

    def test_image_sources(self, parse, postprocessor):
        root = parse("<div id='root'><img src='/i/a.png'><img></div>").select_one("#root")
        postprocessor.resolve_urls(root, BASE_URL)
        images = root.find_all("img")
        assert images[0]["src"] == "https://example.com/i/a.png"
        assert "src" not in images[1].attrs

    def test_no_base_leaves_urls_alone(self, parse, postprocessor):
        root = parse("<div id='root'><a href='/about'>x</a></div>").select_one("#root")
        postprocessor.resolve_urls(root, "")
        assert root.find("a")["href"] == "/about"


@pytest.mark.unit
class TestSerialization:
    def test_clean_html_is_inner_markup(self, parse):
        root = parse("<div id='root'> <p>One</p> </div>").select_one("#root")
        assert clean_html(root) == "<p>One</p>"

    def test_clean_text_keeps_paragraph_breaks(self, parse):
        root = parse("<div id='root'><p>One</p><p>Two</p></div>").select_one("#root")
        assert clean_text(root) == "One\n\nTwo"
