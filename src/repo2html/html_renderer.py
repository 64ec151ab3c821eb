"""Paginated HTML rendering of the repository tree.

Each pass serializes the whole tree depth-first into one standalone HTML
document, emitting only files that have not been rendered yet and that still
fit in the pass's content-length budget. A pass that emits no file produces no
document, which is how the outer loop knows rendering is complete.
"""

import logging
import math
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union
from xml.sax.saxutils import escape as xml_escape

from repo2html.file_tree.nodes import FileNode, FolderNode
from repo2html.types import PathType

logger = logging.getLogger(__name__)

# xml_escape covers &, < and >; quotes are added explicitly
_QUOTE_ENTITIES = {
    '"': "&quot;",
    "'": "&apos;",
}

DOCUMENT_STYLE = """
body {
    font-family: Arial, sans-serif;
    line-height: 1.6;
    margin: 0;
    padding: 20px;
}
.folder {
    margin-left: 20px;
    padding: 5px;
}
.file {
    margin-left: 20px;
    padding: 5px;
    border-left: 2px solid #ccc;
}
.folder-name {
    font-weight: bold;
    color: #2c3e50;
}
.file-name {
    font-weight: bold;
    color: #16a085;
}
.file-content {
    margin-left: 20px;
    margin-top: 5px;
    color: #34495e;
    font-family: monospace;
    white-space: pre-wrap;
}
.folder-children {
    margin-left: 20px;
}
"""

DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>{style}</style>
</head>
<body>
{body}
</body>
</html>
"""


def escape_html(text: str) -> str:
    """Replace the five HTML-reserved characters with their named references.

    Example:
        >>> escape_html('<a href="x">Tom & Jerry\\'s</a>')
        '&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&apos;s&lt;/a&gt;'
    """
    return xml_escape(text, _QUOTE_ENTITIES)


def numbered_path(html_path: PathType, index: int) -> Path:
    """Insert ``index`` between the stem and the suffix of ``html_path``.

    Example:
        >>> numbered_path("out/repo.html", 0).as_posix()
        'out/repo0.html'
        >>> numbered_path("repo", 2).as_posix()
        'repo2'
    """
    path = Path(html_path)
    return path.with_name(f"{path.stem}{index}{path.suffix}")


class PaginatedRenderer:
    """Renders a tree into a sequence of HTML documents under a content-length budget.

    Within a pass, files are considered in depth-first order. An unrendered file is
    emitted unless adding its length to what the pass has already emitted would
    reach the budget; the first file emitted in a pass is exempt from that check,
    so a file longer than the budget is still emitted, alone, in some later pass.
    Deferred files stay unrendered and are picked up by the next pass.

    The ``rendered`` flags on the tree's FileNodes are the renderer's only state,
    so a tree can be rendered once. Iterating the renderer runs passes until one
    produces nothing.

    Attributes:
        root (FolderNode): The tree to render.
        budget (float): Maximum cumulative content length per document.
        title (str): Title used in each document's head. Defaults to the root's name.

    Example:
        >>> root = FolderNode("repo")
        >>> _ = FileNode("a.txt", parent=root, extension="txt", content="x" * 10)
        >>> _ = FileNode("b.txt", parent=root, extension="txt", content="y" * 10)
        >>> len(list(PaginatedRenderer(root, budget=15)))
        2
    """

    def __init__(self, root: FolderNode, budget: Union[int, float] = math.inf, title: Optional[str] = None) -> None:
        self.root = root
        self.budget = budget
        self.title = root.name if title is None else title
        self._cumulative_length = 0
        self._produced_any = False

    def render_once(self) -> Optional[str]:
        """Run one pass over the tree.

        Returns:
            A complete HTML document, or None if every file was already rendered.
        """
        self._cumulative_length = 0
        self._produced_any = False

        body = self._render_folder(self.root)
        if not self._produced_any:
            return None
        return DOCUMENT_TEMPLATE.format(title=escape_html(self.title), style=DOCUMENT_STYLE, body=body)

    def __iter__(self) -> Iterator[str]:
        while True:
            document = self.render_once()
            if document is None:
                return
            yield document

    def _render_folder(self, folder: FolderNode) -> str:
        parts = [
            '<div class="folder">',
            f'<div class="folder-name">{escape_html(folder.name)}</div>',
            '<div class="folder-children">',
        ]
        for child in folder.children:
            if isinstance(child, FolderNode):
                parts.append(self._render_folder(child))
            else:
                parts.append(self._render_file(child))
        parts.append("</div>")
        parts.append("</div>")
        return "\n".join(parts)

    def _render_file(self, file: FileNode) -> str:
        if file.rendered:
            return ""
        if self._cumulative_length and self._cumulative_length + file.content_length >= self.budget:
            return ""

        file.mark_rendered()
        self._cumulative_length += file.content_length
        self._produced_any = True
        return (
            f'<div class="file" data-extension="{escape_html(file.extension)}">\n'
            f'<div class="file-name">{escape_html(file.name)}</div>\n'
            f'<div class="file-content">{escape_html(file.content)}</div>\n'
            "</div>"
        )


def render(root: FolderNode, budget: Union[int, float] = math.inf) -> List[str]:
    """Render ``root`` into as many documents as the budget requires."""
    return list(PaginatedRenderer(root, budget))


def write_documents(documents: Iterable[str], html_path: PathType) -> List[Path]:
    """Write each document to a numbered file next to ``html_path``.

    Documents are written as they are produced, so when ``documents`` is a renderer
    each pass is on disk before the next one runs. If a write fails, the files
    already written stay on disk.

    Returns:
        The paths written, in order.
    """
    written: List[Path] = []
    for index, document in enumerate(documents):
        path = numbered_path(html_path, index)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(document, encoding="utf-8")
        logger.info("Wrote %s", path)
        written.append(path)
    return written
