import unittest

from html2pdf.core.renderer import render_markdown


class TestMarkdownRenderer(unittest.TestCase):

    def test_fenced_code_language_class(self):
        html = render_markdown("```python\nprint('hi')\n```\n")
        self.assertIn('<pre><code class="language-python">', html)
        self.assertIn('</code></pre>', html)

    def test_code_is_escaped(self):
        html = render_markdown("```\nif a < b:\n```\n")
        self.assertIn("a &lt; b", html)

    def test_raw_iframe_passes_through(self):
        text = 'Intro\n\n<iframe src="https://example.com/v"></iframe>\n\nOutro\n'
        html = render_markdown(text)
        self.assertIn('<iframe src="https://example.com/v"></iframe>', html)

    def test_tables(self):
        text = "| a | b |\n|---|---|\n| 1 | 2 |\n"
        html = render_markdown(text)
        self.assertIn("<table>", html)
        self.assertIn("<td>1</td>", html)

    def test_headings_get_ids(self):
        html = render_markdown("# Getting Started\n")
        self.assertIn('<h1 id="getting-started">Getting Started</h1>', html)


if __name__ == '__main__':
    unittest.main()
