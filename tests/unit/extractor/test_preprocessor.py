"""
Unit tests for document preprocessing.
"""

import pytest
from article_extractor.dom import get_text
from article_extractor.extractor.preprocessor import Preprocessor

LONG_TEXT = "Plain readable prose without any anchors at all. " * 5
RUN = "This run of loose text is comfortably longer than thirty characters"


@pytest.fixture
def preprocessor():
    return Preprocessor()


@pytest.mark.unit
class TestRemoval:
    def test_non_content_tags(self, parse, preprocessor):
        doc = parse(
            "<head><style>p{}</style><meta name='x' content='y'></head>"
            "<body><p>Keep</p><script>var a;</script><noscript>n</noscript>"
            "<iframe src='x'></iframe></body>"
        )
        preprocessor.remove_tags(doc)
        assert doc.select("script, style, noscript, iframe, meta") == []
        assert doc.select_one("p").get_text() == "Keep"

    def test_hidden_elements(self, parse, preprocessor):
        doc = parse(
            "<p id='a' style='display: none;'>a</p>"
            "<p id='b' style='VISIBILITY:hidden'>b</p>"
            "<p id='c' hidden>c</p>"
            "<p id='d' aria-hidden='true'>d</p>"
            "<p id='e' style='color: red'>e</p>"
            "<p id='f' aria-hidden='false'>f</p>"
        )
        preprocessor.remove_hidden(doc)
        assert [p["id"] for p in doc.select("p")] == ["e", "f"]

    def test_widgets(self, parse, preprocessor):
        doc = parse(
            "<div class='chatbot-container'>Ask me</div>"
            "<div id='ai-summary-box'>Summary</div>"
            "<div id='maintenance'>Kept</div>"
            "<main id='ai-answer'><p>Protected</p></main>"
        )
        preprocessor.remove_widgets(doc)
        assert doc.select_one(".chatbot-container") is None
        assert doc.select_one("#ai-summary-box") is None
        assert doc.select_one("#maintenance") is not None
        assert doc.select_one("main") is not None


@pytest.mark.unit
class TestUnlikelyCandidates:
    def test_structural_tags_removed_unless_whitelisted(self, parse, preprocessor):
        doc = parse(
            "<header id='site'>Site</header>"
            "<header class='article-header'><h1>Headline</h1></header>"
            "<nav>Menu</nav><aside>Aside</aside><footer>Foot</footer>"
        )
        preprocessor.strip_unlikely_candidates(doc)
        assert doc.select_one("#site") is None
        assert doc.select_one(".article-header") is not None
        assert doc.select("nav, aside, footer") == []

    def test_short_blacklisted_block_removed(self, parse, preprocessor):
        doc = parse("<div class='sidebar'>Short sidebar</div><div id='keep'>Short</div>")
        preprocessor.strip_unlikely_candidates(doc)
        assert doc.select_one(".sidebar") is None
        assert doc.select_one("#keep") is not None

    def test_long_unlinked_blacklisted_block_survives(self, parse, preprocessor):
        doc = parse(f"<div class='comment-section'>{LONG_TEXT}</div>")
        preprocessor.strip_unlikely_candidates(doc)
        assert doc.select_one(".comment-section") is not None

    def test_long_link_heavy_blacklisted_block_removed(self, parse, preprocessor):
        links = "".join(f"<a href='/{i}'>Related headline number {i}</a>" for i in range(12))
        doc = parse(f"<div class='related'>{links}</div>")
        preprocessor.strip_unlikely_candidates(doc)
        assert doc.select_one(".related") is None

    def test_whitelist_overrides_blacklist(self, parse, preprocessor):
        doc = parse("<div class='article-sidebar'>Short</div>")
        preprocessor.strip_unlikely_candidates(doc)
        assert doc.select_one(".article-sidebar") is not None

    def test_protected_tags_survive(self, parse, preprocessor):
        doc = parse("<article class='social'><p>Short</p></article>")
        preprocessor.strip_unlikely_candidates(doc)
        assert doc.select_one("article") is not None


@pytest.mark.unit
class TestArticleBodyConversion:
    def test_text_runs_become_paragraphs(self, parse, preprocessor):
        doc = parse(
            "<div data-articlebody='1'><div id='runs'>"
            f"{RUN} one<em>a</em>{RUN} two<em>b</em>{RUN} three"
            "<div class='trc_related'>Sponsored</div>"
            "</div></div>"
        )
        preprocessor.convert_article_body(doc)
        container = doc.select_one("#runs")
        assert [get_text(p) for p in container.select("p")] == [f"{RUN} one", f"{RUN} two", f"{RUN} three"]
        assert container.select_one(".trc_related") is None
        assert len(container.select("em")) == 2

    def test_container_with_paragraphs_is_untouched(self, parse, preprocessor):
        doc = parse(
            "<div data-articlebody='1'><p>Existing</p><div id='runs'>"
            f"{RUN} one<em>a</em>{RUN} two<em>b</em>{RUN} three"
            "</div></div>"
        )
        preprocessor.convert_article_body(doc)
        assert doc.select_one("#runs").select("p") == []

    def test_too_few_runs_is_untouched(self, parse, preprocessor):
        doc = parse(
            "<div data-articlebody='1'><div id='runs'>"
            f"{RUN} {RUN} {RUN} {RUN}<em>a</em>{RUN}"
            "</div></div>"
        )
        preprocessor.convert_article_body(doc)
        assert doc.select_one("#runs").select("p") == []


@pytest.mark.unit
class TestParagraphShaping:
    def test_text_only_div_is_wrapped(self, parse, preprocessor):
        doc = parse("<div id='d'>Loose text <b>bold</b></div>")
        preprocessor.convert_to_paragraphs(doc)
        div = doc.select_one("#d")
        assert len(div.contents) == 1
        assert div.contents[0].name == "p"
        assert get_text(div.contents[0]) == "Loose text bold"

    def test_nested_inline_container_is_not_rewrapped(self, parse, preprocessor):
        doc = parse("<div id='outer'><span id='inner'>Inner text</span></div>")
        preprocessor.convert_to_paragraphs(doc)
        assert doc.select_one("#outer > p > #inner") is not None
        assert doc.select_one("#inner").find("p") is None

    def test_block_and_empty_containers_are_skipped(self, parse, preprocessor):
        doc = parse("<div id='block'><p>Para</p></div><div id='empty'></div>")
        preprocessor.convert_to_paragraphs(doc)
        assert len(doc.select("#block > p")) == 1
        assert doc.select_one("#empty").contents == []

    def test_line_breaks_split_into_paragraphs(self, parse, preprocessor):
        doc = parse("<div id='d'>one<br>two<br><br>three</div>")
        preprocessor.split_line_breaks(doc)
        div = doc.select_one("#d")
        assert [child.name for child in div.contents] == ["p", "p", "p"]
        assert [get_text(p) for p in div.contents] == ["one", "two", "three"]

    def test_element_only_segment_is_kept(self, parse, preprocessor):
        doc = parse("<div id='d'>caption<br><img src='a.png'></div>")
        preprocessor.split_line_breaks(doc)
        paragraphs = doc.select("#d > p")
        assert len(paragraphs) == 2
        assert paragraphs[1].find("img") is not None

    def test_lone_paragraph_is_split_and_unwrapped(self, parse, preprocessor):
        doc = parse("<div id='d'><p>one<br>two</p></div>")
        preprocessor.split_line_breaks(doc)
        div = doc.select_one("#d")
        assert [get_text(p) for p in div.select("p")] == ["one", "two"]
        assert div.select("p p") == []

    def test_full_pass_shapes_loose_breaks(self, parse, preprocessor):
        doc = parse("<div id='d'>first line<br>second line</div>")
        preprocessor.process(doc)
        div = doc.select_one("#d")
        assert [get_text(p) for p in div.select("p")] == ["first line", "second line"]
        assert div.find("br") is None
