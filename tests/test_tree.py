from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from inkwell.services.tree import walk


def test_walk_visits_every_node_in_document_order():
    root = SyntaxTreeNode(MarkdownIt("commonmark").parse("# Title\n\nparagraph\n"))
    seen = []
    walk(root, lambda node: seen.append(node.type))
    assert seen == ["root", "heading", "inline", "text", "paragraph", "inline", "text"]


def test_walk_allows_payload_mutation():
    root = SyntaxTreeNode(MarkdownIt("commonmark").parse("```\nold\n```\n"))

    def rewrite(node):
        if node.type == "fence":
            node.token.content = "new\n"

    walk(root, rewrite)
    assert root.children[0].content == "new\n"
