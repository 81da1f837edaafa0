# topmark:header:start
#
#   project      : YamlBlock
#   file         : block.py
#   file_relpath : src/yamlblock/rendering/block.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Block-style YAML rendering of source values.

`render_block` turns a source value into YAML text at a given indentation depth.
Every rendered fragment ends with exactly one newline, and its first line is never
indented: the enclosing context (a ``- `` dash or a ``key:`` line) supplies the
indentation of that first line. This is what produces the compact ``- - a`` and
``- a: 1`` forms.

Layout rules, for a collection rendered at depth ``d``:

Sequences:
    * one ``- item`` per element; the first dash is unindented, later ones are
      preceded by ``d`` spaces;
    * scalars and empty collections sit right after the dash;
    * non-empty collections are rendered at ``d + 2`` and attach after the dash.

Mappings:
    * entries in document order; the first is unindented, later ones are
      preceded by ``d`` spaces;
    * inline values (scalars, ``[]``, ``{}``) follow ``key: `` on the same line;
    * other values go on the next lines: ``key:``, newline, ``d + 2`` spaces,
      then the value rendered at ``d + 2``.

Nested block fragments lose their trailing newline and are given back a single one
wherever they are joined, so nesting never produces blank lines. Leaf text
(scalars, ``[]``, ``{}``) after a dash is kept verbatim; inline mapping values are
trimmed.

Traversal uses an explicit stack of frames instead of Python recursion: nesting
depth is limited by available memory, not by the interpreter recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from yamlblock.config.logging import get_logger
from yamlblock.core.values import SourceValue, YMapping, YNull, YSequence, is_block
from yamlblock.rendering.scalars import format_leaf, is_inline

if TYPE_CHECKING:
    from yamlblock.config.logging import YamlblockLogger

logger: YamlblockLogger = get_logger(__name__)

INDENT_STEP: Final[int] = 2
LINE_END: Final[str] = "\n"


@dataclass
class _Frame:
    """A collection whose children are being rendered.

    Attributes:
        value (YSequence | YMapping): The collection being rendered.
        depth (int): Indentation depth of the collection.
        children (list[tuple[SourceValue, int]]): Child values with the depth each
            one is rendered at, in output order.
        rendered (list[str]): Rendered text of the children completed so far.
    """

    value: YSequence | YMapping
    depth: int
    children: list[tuple[SourceValue, int]]
    rendered: list[str] = field(default_factory=lambda: [])

    @classmethod
    def open(cls, value: YSequence | YMapping, depth: int) -> _Frame:
        nested: int = depth + INDENT_STEP
        if isinstance(value, YSequence):
            # Inline items carry no indentation of their own.
            children = [(item, nested if is_block(item) else 0) for item in value.items]
        else:
            children = [(item, nested) for _, item in value.entries]
        return cls(value=value, depth=depth, children=children)

    @property
    def next_child(self) -> tuple[SourceValue, int] | None:
        index: int = len(self.rendered)
        return self.children[index] if index < len(self.children) else None

    def join(self) -> str:
        if isinstance(self.value, YSequence):
            return join_sequence(self.value, self.rendered, depth=self.depth)
        return join_mapping(self.value, self.rendered, depth=self.depth)


def join_sequence(sequence: YSequence, items: list[str], *, depth: int) -> str:
    """Assemble rendered sequence items into a block sequence.

    Leaf items (scalars and empty collections) are written verbatim after the
    dash; nested blocks only lose their trailing newline before being attached.

    Args:
        sequence (YSequence): The sequence being rendered (supplies the item kinds).
        items (list[str]): Rendered text of each element.
        depth (int): Indentation depth of the sequence.

    Returns:
        str: The block sequence, ending with a single newline.
    """
    indent: str = " " * depth
    lines: list[str] = []
    for index, (item, text) in enumerate(zip(sequence.items, items)):
        prefix: str = "" if index == 0 else indent
        if isinstance(item, YNull):
            # A null element leaves a bare dash.
            lines.append(f"{prefix}-\n")
        elif is_block(item):
            lines.append(f"{prefix}- {text.rstrip(LINE_END)}\n")
        else:
            lines.append(f"{prefix}- {text.removesuffix(LINE_END)}\n")
    return "".join(lines)


def join_mapping(mapping: YMapping, values: list[str], *, depth: int) -> str:
    """Assemble rendered mapping values into a block mapping.

    Args:
        mapping (YMapping): The mapping being rendered (supplies keys and value kinds).
        values (list[str]): Rendered text of each value, in entry order.
        depth (int): Indentation depth of the mapping.

    Returns:
        str: The block mapping, ending with a single newline.
    """
    indent: str = " " * depth
    nested_indent: str = " " * (depth + INDENT_STEP)
    entries: list[str] = []
    for index, ((key, value), text) in enumerate(zip(mapping.entries, values)):
        prefix: str = "" if index == 0 else indent
        if is_inline(value, text):
            # A null value leaves a bare "key:".
            entries.append(f"{prefix}{key}: {text.strip()}".rstrip())
        else:
            entries.append(f"{prefix}{key}:\n{nested_indent}{text.rstrip(LINE_END)}")
    return "\n".join(entries) + "\n"


def render_block(value: SourceValue, depth: int = 0) -> str:
    """Render ``value`` as block-style YAML at the given depth.

    The first line of the result is not indented; continuation lines are.

    Args:
        value (SourceValue): The value to render.
        depth (int): Indentation depth (in spaces) of the value's block.

    Returns:
        str: The rendered text, ending with exactly one newline.
    """
    if not isinstance(value, (YSequence, YMapping)) or not is_block(value):
        return format_leaf(value) + LINE_END

    stack: list[_Frame] = [_Frame.open(value, depth)]
    max_stack: int = 1
    while True:
        frame: _Frame = stack[-1]
        pending: tuple[SourceValue, int] | None = frame.next_child
        if pending is not None:
            child, child_depth = pending
            if isinstance(child, (YSequence, YMapping)) and is_block(child):
                stack.append(_Frame.open(child, child_depth))
                max_stack = max(max_stack, len(stack))
            else:
                frame.rendered.append(format_leaf(child) + LINE_END)
            continue

        text: str = frame.join()
        stack.pop()
        if not stack:
            logger.trace("Rendered block at depth %d (max nesting %d)", depth, max_stack)
            return text
        stack[-1].rendered.append(text)
