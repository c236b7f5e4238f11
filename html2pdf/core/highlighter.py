import logging

from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

# Language tags as written in fenced code -> grammar id
LANGUAGE_ALIASES = {
    'vue': 'markup',
    'html': 'markup',
    'md': 'markdown',
    'ts': 'typescript',
    'py': 'python',
}

# Grammar ids that Pygments knows under another name
PYGMENTS_NAMES = {
    'markup': 'html',
    'plaintext': 'text',
}


def normalize_language(language_tag: str) -> str:
    """Lower-cases a language tag and resolves it through LANGUAGE_ALIASES."""
    tag = (language_tag or "").lower()
    return LANGUAGE_ALIASES.get(tag, tag)


class GrammarRegistry:
    """
    Process-wide table of loaded grammars (Pygments lexers), keyed by grammar id.

    Grammars are loaded on first request and kept for the life of the process.
    Entries are only ever added, so a duplicate load of the same id is harmless.
    """
    _instance = None

    def __init__(self):
        self._grammars = {}

    @staticmethod
    def get_instance():
        if GrammarRegistry._instance is None:
            GrammarRegistry._instance = GrammarRegistry()
        return GrammarRegistry._instance

    def get(self, grammar_id):
        return self._grammars.get(grammar_id)

    def is_loaded(self, grammar_id):
        return grammar_id in self._grammars

    def loaded_ids(self):
        return sorted(self._grammars)

    def ensure_loaded(self, grammar_id) -> bool:
        """Loads the grammar for `grammar_id` if absent. Returns False on failure."""
        if grammar_id in self._grammars:
            return True

        name = PYGMENTS_NAMES.get(grammar_id, grammar_id)
        try:
            # Keep leading/trailing newlines so line numbers stay aligned
            lexer = get_lexer_by_name(name, stripnl=False, ensurenl=False)
        except ClassNotFound:
            logger.warning(f"Highlighter: no grammar available for language '{grammar_id}'")
            return False

        self._grammars.setdefault(grammar_id, lexer)
        logger.info(f"Highlighter: loaded grammar '{grammar_id}' ({lexer.name})")
        return True


# Bare token spans, the surrounding <pre><code> is kept from the source
_FORMATTER = HtmlFormatter(nowrap=True)


def highlight_with_grammar(text: str, grammar, grammar_id: str) -> str:
    """Tokenizes `text` with a loaded grammar and returns span markup."""
    logger.debug(f"Highlighter: tokenizing {len(text)} chars as '{grammar_id}'")
    return pygments_highlight(text, grammar, _FORMATTER)


def highlight(text: str, language_tag: str, registry: GrammarRegistry = None) -> str:
    """
    Returns highlighted markup for `text`, or `text` itself when no grammar applies.

    Unknown languages and engine failures fall back to the plain text; this
    function does not raise.
    """
    grammar_id = normalize_language(language_tag)
    if not grammar_id:
        return text

    registry = registry or GrammarRegistry.get_instance()
    if not registry.is_loaded(grammar_id):
        registry.ensure_loaded(grammar_id)

    grammar = registry.get(grammar_id)
    if grammar is None:
        return text

    try:
        return highlight_with_grammar(text, grammar, grammar_id)
    except Exception as e:
        logger.warning(f"Highlighter: failed to highlight '{grammar_id}' code: {e}")
        return text
