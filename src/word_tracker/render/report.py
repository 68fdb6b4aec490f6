"""
Jinja2-based report renderer. Loads one text template per report mode.
"""

from __future__ import annotations

from collections.abc import Iterable

from jinja2 import Environment, PackageLoader, StrictUndefined

from ..components.bstree import BSTree
from ..components.word import Word
from ..core.types import LineNumber, ReportMode


def format_lines(lines: Iterable[LineNumber]) -> str:
    return "[" + ", ".join(str(n) for n in lines) + "]"


def format_occurrences(word: Word) -> str:
    """file1 [1, 2]; file2 [5], with files in first-seen order."""
    return "; ".join(
        f"{filename} {format_lines(lines)}"
        for filename, lines in word.get_occurrences().items()
    )


def get_jinja_env() -> Environment:
    env = Environment(
        loader=PackageLoader("word_tracker", "templates"),
        autoescape=False,
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["occurrences"] = format_occurrences
    return env


def render_report(words: Iterable[Word], mode: ReportMode) -> str:
    """Render words, assumed ascending, one line per word."""
    env = get_jinja_env()
    template = env.get_template(mode.template_name)
    return template.render(words=list(words))


def render_tree(tree: BSTree[Word], mode: ReportMode) -> str:
    return render_report(tree.inorder_iterator(), mode)
