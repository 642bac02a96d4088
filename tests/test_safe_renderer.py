"""Tests for safe markdown rendering."""
import pytest
from core.models.answer import AnswerResponse, Table
from core.services.formatting import safe_renderer
from core.services.formatting.display import DisplayRenderer
from core.services.formatting.safe_renderer import (
    is_script_url,
    prepare_markdown,
    render_safe,
    safe_url,
    sanitize_html,
    strip_script_schemes,
    tidy_headings,
)


class TestSafeRenderer:
    """Test cases for render_safe."""

    def test_paragraph(self):
        assert render_safe("hello") == "<p>hello</p>"

    def test_empty(self):
        assert render_safe("") == ""
        assert render_safe(None) == ""

    def test_line_breaks_preserved(self):
        assert "<br" in render_safe("line one\nline two")

    def test_list(self):
        html = render_safe("Intro\n\n- a\n- b")
        assert "<li>a</li>" in html
        assert "<li>b</li>" in html

    def test_markdown_table(self):
        html = render_safe("| a | b |\n|---|---|\n| 1 | 2 |")
        assert "<table>" in html
        assert "<td>1</td>" in html

    def test_script_block_removed(self):
        html = render_safe("Hello <script>alert(1)</script> world")
        assert "<script" not in html.lower()
        assert "alert(1)" not in html
        assert "Hello" in html and "world" in html

    def test_script_block_on_own_line_removed(self):
        html = render_safe("Intro\n\n<script type=\"text/javascript\">\nsteal()\n</script>\n\nOutro")
        assert "<script" not in html.lower()
        assert "steal()" not in html

    def test_event_handler_removed(self):
        html = render_safe('<img src="x.png" onerror="alert(1)">')
        assert "onerror=" not in html
        assert 'src="x.png"' in html

    def test_unquoted_event_handler_removed(self):
        assert "onerror=" not in render_safe("<img src=x onerror=alert(1)>")

    def test_javascript_link_neutralized(self):
        html = render_safe("[click](javascript:alert(1))")
        assert "javascript:" not in html.lower()

    def test_handler_after_quoted_angle_bracket_removed(self):
        """Test a quoted ">" does not hide a following unquoted handler."""
        html = render_safe('<img src=x alt=">" onerror=alert(1)//>')
        assert "onerror" not in html.lower()

    def test_entity_encoded_script_link_removed(self):
        html = render_safe('<a title=">" href="java&#115;cript:alert(1)">x</a>')
        assert "href" not in html
        assert "cript:" not in html

    def test_handler_in_code_span_removed(self):
        assert "onerror" not in render_safe("`<img src=x onerror=alert(1)>`")

    def test_heading_marker_artifact(self):
        assert "<h1>Title</h1>" in render_safe("# # Title")

    def test_render_failure_returns_original(self, monkeypatch):
        """Test a conversion error falls back to the unmodified markdown."""
        def broken(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(safe_renderer.markdown, "markdown", broken)
        assert render_safe("# Keep me") == "# Keep me"


class TestPrepareMarkdown:
    """Test cases for the pre-conversion normalization."""

    def test_spacing_characters(self):
        assert prepare_markdown("a&nbsp;b\u00a0c\td") == "a b c d"

    def test_glued_rule(self):
        assert prepare_markdown("Summary---\nNext") == "Summary\n\n---\n\nNext"

    def test_table_separator_untouched(self):
        table = "| a | b |\n|---|---|\n| 1 | 2 |"
        assert prepare_markdown(table) == table

    def test_star_bullet_spacing(self):
        assert prepare_markdown("*   item") == "* item"

    def test_heading_and_quote_spacing(self):
        assert prepare_markdown("#Title\n>quote") == "# Title\n> quote"


class TestSanitizeHtml:
    """Test cases for sanitize_html and tidy_headings."""

    def test_nested_fragments(self):
        """Test removal repeats until reassembled fragments are gone."""
        html = sanitize_html("<scr<script>x</script>ipt>alert(1)</script>")
        assert "<script" not in html.lower()

    def test_mixed_case(self):
        html = sanitize_html('<a href="JaVaScRiPt:go()" OnClick="go()">x</a>')
        assert "javascript:" not in html.lower()
        assert "onclick" not in html.lower()

    def test_single_quoted_handler(self):
        assert "onload" not in sanitize_html("<body onload='go()'>")

    def test_prose_left_alone(self):
        assert sanitize_html("<p>one = two</p>") == "<p>one = two</p>"

    def test_encoded_script_url_dropped(self):
        assert sanitize_html('<a href="java&#115;cript:alert(1)">x</a>') == "<a>x</a>"
        assert sanitize_html('<a href=" &#10;JAVA\tSCRIPT:go()">x</a>') == "<a>x</a>"

    def test_safe_link_kept(self):
        html = '<a href="https://example.com/a?b=1&amp;c=2">x</a>'
        assert sanitize_html(html) == html

    def test_malformed_tag_name_unwrapped(self):
        assert sanitize_html("<p>a<scr<img>b</p>") == "<p>ab</p>"

    def test_is_script_url(self):
        assert is_script_url("  javascript:go()")
        assert is_script_url("&#106;avascript:go()")
        assert not is_script_url("https://example.com/javascript")

    def test_safe_url(self):
        assert safe_url("java\nscript:go()") == ""
        assert safe_url("https://example.com") == "https://example.com"

    def test_strip_script_schemes(self):
        assert strip_script_schemes("javajavascript:script:alert(1)") == "alert(1)"

    def test_tidy_headings(self):
        assert tidy_headings('<h1 id="a">### Title</h1>') == '<h1 id="a">Title</h1>'
        assert tidy_headings("<h2>## </h2><p>x</p>") == "<p>x</p>"


class TestDisplayRenderer:
    """Test cases for DisplayRenderer."""

    @pytest.fixture
    def renderer(self):
        return DisplayRenderer()

    def test_render_with_table_and_icon(self, renderer):
        response = AnswerResponse(
            answer="Plans:\n\n[TABLE:Pricing]\n\nCall [ICON:phone]",
            tables=[Table(title="Pricing", headers=["Plan", "Price"], rows=[["Basic", "$10"]])],
        )
        html = renderer.render(response)
        assert "[TABLE:" not in html
        assert "[ICON:" not in html
        assert ">Basic</td>" in html
        assert "<svg" in html

    def test_render_sanitizes_table_cells(self, renderer):
        response = AnswerResponse(
            answer="[TABLE:T]",
            tables=[Table(title="T", headers=["h"], rows=[["<script>x()</script>"]])],
        )
        assert "<script" not in renderer.render(response)

    def test_render_empty(self, renderer):
        assert renderer.render(AnswerResponse()) == ""
