from __future__ import annotations

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml, unescapeAll
from markdown_it.renderer import RendererHTML
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.anchors import anchors_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from inkwell.exceptions import MalformedContent
from inkwell.services.highlighter import highlight
from inkwell.services.tree import walk


CODE_BLOCK_TYPES = frozenset({"fence", "code_block"})
HIGHLIGHTED = "highlighted"

# Raw HTML stays enabled for parsing and rendering alike: posts embed gists
# and other third-party snippets.
_markdown = (
    MarkdownIt("commonmark", {"html": True, "linkify": True})
    .enable("table")
    .enable("strikethrough")
    .enable("linkify")
)
_markdown.use(tasklists_plugin)
_markdown.use(anchors_plugin, min_level=1, max_level=6, permalink=True, permalinkSymbol="#")


def _language_of(info: str) -> str:
    info = unescapeAll(info).strip() if info else ""
    return info.split(maxsplit=1)[0] if info else ""


def _render_code_block(self, tokens, idx, options, env):
    token = tokens[idx]
    if not token.meta.get(HIGHLIGHTED):
        if token.type == "fence":
            return RendererHTML.fence(self, tokens, idx, options, env)
        return RendererHTML.code_block(self, tokens, idx, options, env)

    language = _language_of(token.info)
    class_attr = f' class="{options.langPrefix}{escapeHtml(language)}"' if language else ""
    # Content is already markup produced by the highlighter.
    return f"<pre><code{class_attr}>{token.content}</code></pre>\n"


_markdown.add_render_rule("fence", _render_code_block)
_markdown.add_render_rule("code_block", _render_code_block)


def _highlight_code_block(node: SyntaxTreeNode) -> None:
    if node.type not in CODE_BLOCK_TYPES or node.token is None:
        return
    token = node.token
    token.content = highlight(token.content, _language_of(token.info))
    token.meta[HIGHLIGHTED] = True


def render(source: str) -> str:
    """Render markdown ``source`` to HTML with highlighted code blocks."""
    if not isinstance(source, str):
        raise MalformedContent(
            f"Markdown source must be decoded text, got {type(source).__name__}"
        )

    env: dict = {}
    tokens = _markdown.parse(source, env)
    root = SyntaxTreeNode(tokens)
    walk(root, _highlight_code_block)
    return _markdown.renderer.render(root.to_tokens(), _markdown.options, env)
