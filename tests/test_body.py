"""Tests for extract_body."""

from pages.body import extract_body


class TestExtractBody:
    def test_full_document(self):
        html = "<html><body><p>Hi</p><span>there</span></body></html>"
        assert extract_body(html) == "<p>Hi</p><span>there</span>"

    def test_bare_fragment_is_wrapped_and_unwrapped(self):
        assert extract_body("<p>Hi</p>") == "<p>Hi</p>"

    def test_head_is_dropped(self):
        html = (
            "<!DOCTYPE html><html><head><title>Doc</title>"
            "<style>p {}</style></head><body><h1>Title</h1></body></html>"
        )
        assert extract_body(html) == "<h1>Title</h1>"

    def test_nested_markup_preserved(self):
        html = '<body><ul class="list"><li><a href="/x">X</a></li></ul></body>'
        assert extract_body(html) == '<ul class="list"><li><a href="/x">X</a></li></ul>'

    def test_unclosed_tags_do_not_raise(self):
        result = extract_body("<body><div><p>open")
        assert "open" in result
        assert result.startswith("<div>")

    def test_entities_stay_escaped(self):
        assert extract_body("<body><p>a &lt; b</p></body>") == "<p>a &lt; b</p>"

    def test_no_body_returns_empty_string(self):
        assert extract_body("") == ""

    def test_bytes_input(self):
        html = b"<html><body><p>Hi</p></body></html>"
        assert extract_body(html) == "<p>Hi</p>"
