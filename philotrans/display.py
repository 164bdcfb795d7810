"""
Markdown rendering of result text for the web panels
"""
import markdown


def to_html(text: str) -> str:
    """Render Markdown; raw HTML in the text is escaped, never passed through"""
    md = markdown.Markdown(extensions=["tables", "fenced_code"])
    md.preprocessors.deregister("html_block")
    md.inlinePatterns.deregister("html")
    return md.convert(text or "")
