from bs4 import BeautifulSoup

from html2pdf.core.code_blocks import (
    build_line_numbers,
    count_lines,
    extract_language,
    transform_code_blocks,
)


def plain(text, language):
    return text


class RecordingHighlighter:
    def __init__(self):
        self.calls = []

    def __call__(self, text, language):
        self.calls.append((text, language))
        return text


class TestLineNumbers:
    def test_count_lines(self):
        assert count_lines("a\nb\nc") == 3
        assert count_lines("a\nb\nc\n") == 4
        assert count_lines("") == 1

    def test_gutter_markers_in_order(self):
        gutter = BeautifulSoup(build_line_numbers(3), 'html.parser')
        numbers = [s.get_text() for s in gutter.find_all('span', class_='line-number')]
        assert numbers == ['1', '2', '3']
        assert gutter.div['class'] == ['line-numbers-wrapper']


class TestExtractLanguage:
    def test_language_class(self):
        assert extract_language('<pre><code class="language-python">') == 'python'

    def test_language_among_other_classes(self):
        assert extract_language('<pre><code class="hljs language-js extra">') == 'js'

    def test_defaults_to_plaintext(self):
        assert extract_language('<pre><code>') == 'plaintext'
        assert extract_language('<pre><code class="hljs">') == 'plaintext'


class TestCodeBlockTransformation:
    def test_python_block_has_three_line_markers(self):
        html = '<pre><code class="language-python">a\nb\nc</code></pre>'
        soup = BeautifulSoup(transform_code_blocks(html), 'html.parser')

        container = soup.find('div', class_='language-python')
        assert container is not None
        assert 'line-numbers-mode' in container['class']
        assert len(soup.find_all('span', class_='line-number')) == 3
        assert soup.find('span', class_='lang').get_text() == 'python'

    def test_block_without_class_is_plaintext(self):
        html = '<pre><code>plain text</code></pre>'
        output = transform_code_blocks(html, highlighter=plain)
        soup = BeautifulSoup(output, 'html.parser')

        assert soup.find('span', class_='lang').get_text() == 'plaintext'
        assert output.startswith('<div class="language-plaintext line-numbers-mode"><pre><code>plain text</code></pre>')

    def test_output_layout(self):
        html = '<pre><code class="language-js">x</code></pre>'
        assert transform_code_blocks(html, highlighter=plain) == (
            '<div class="language-js line-numbers-mode">'
            '<pre><code class="language-js">x</code></pre>'
            '<div class="line-numbers-wrapper" aria-hidden="true"><span class="line-number">1</span><br></div>'
            '<button title="Copy Code" class="copy"></button>'
            '<span class="lang">js</span>'
            '</div>'
        )

    def test_only_lt_gt_are_unescaped(self):
        recorder = RecordingHighlighter()
        html = '<pre><code class="language-html">&lt;b&gt;a &amp;&amp; b&lt;/b&gt;</code></pre>'
        transform_code_blocks(html, highlighter=recorder)

        assert recorder.calls == [('<b>a &amp;&amp; b</b>', 'html')]

    def test_highlighter_gets_raw_language_tag(self):
        recorder = RecordingHighlighter()
        transform_code_blocks('<pre><code class="language-py">x = 1\n</code></pre>', highlighter=recorder)
        assert recorder.calls == [('x = 1\n', 'py')]

    def test_unknown_language_keeps_unescaped_code(self):
        html = '<pre><code class="language-zzzfake">a &lt; b</code></pre>'
        output = transform_code_blocks(html)
        assert '<pre><code class="language-zzzfake">a < b</code></pre>' in output

    def test_text_without_code_is_unchanged(self):
        html = '<p>Inline <code>code</code> and a <pre>pre block</pre></p>'
        assert transform_code_blocks(html) == html

    def test_unclosed_block_is_left_untouched(self):
        html = '<p>a</p><pre><code class="language-python">x = 1\n<p>b</p>'
        assert transform_code_blocks(html) == html

    def test_blocks_processed_left_to_right(self):
        recorder = RecordingHighlighter()
        html = (
            '<pre><code class="language-python">one</code></pre>'
            '<p>between</p>'
            '<pre><code class="language-ts">two</code></pre>'
        )
        output = transform_code_blocks(html, highlighter=recorder)

        assert recorder.calls == [('one', 'python'), ('two', 'ts')]
        assert output.index('language-python') < output.index('<p>between</p>') < output.index('language-ts')

    def test_unclosed_block_before_closed_one(self):
        recorder = RecordingHighlighter()
        html = '<pre><code>open<pre><code class="language-python">x</code></pre>'
        output = transform_code_blocks(html, highlighter=recorder)

        assert recorder.calls == [('x', 'python')]
        assert output.startswith('<pre><code>open<div class="language-python line-numbers-mode">')
