"""
Unit tests: Markdown rendering of results
"""
import os
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from philotrans.display import to_html


class TestToHtml(unittest.TestCase):

    def test_markdown_is_rendered(self):
        html = to_html("**Varlık** ve *Zaman*")
        self.assertIn("<strong>Varlık</strong>", html)
        self.assertIn("<em>Zaman</em>", html)

    def test_inline_html_is_escaped(self):
        html = to_html('Varlık <img src=x onerror="alert(1)">')
        self.assertNotIn("<img", html)
        self.assertIn("&lt;img", html)

    def test_block_html_is_escaped(self):
        html = to_html("<script>alert(1)</script>\n\nÖnce")
        self.assertNotIn("<script>", html)
        self.assertIn("&lt;script&gt;", html)

    def test_empty_text(self):
        self.assertEqual(to_html(None), "")


if __name__ == '__main__':
    unittest.main()
