"""Outline codec: outline trees to indented text lines and back.

Write path: each node becomes one line, indented by one shift unit per tree level,
suffixed with `|<page>` when the node resolves to a page.

Read path: the parent of a line is the nearest preceding line whose depth is
strictly smaller. Lines that cannot become nodes get an infinite depth, so they
are never picked as a parent and never stop the backward scan.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from pdfmeta.backends.protocol import NamedDestinationResolver, PageResolver
from pdfmeta.codec.grammar import format_line, parse_line, split_page_number
from pdfmeta.codec.sanitizer import sanitize_title
from pdfmeta.config import DestinationPolicy
from pdfmeta.errors import (
    DestinationError,
    EmptyTitleError,
    MalformedLineError,
    UnsupportedDestinationError,
)
from pdfmeta.logging import get_logger
from pdfmeta.models import NamedDestination, OutlineNode, PageDestination

logger = get_logger(__name__)


def resolve_page_number(
    node: OutlineNode,
    pages: PageResolver | None = None,
    names: NamedDestinationResolver | None = None,
) -> int | None:
    """Return the 1-based page a node points to, or None if it has no destination.

    A named destination that is not found yields None with a diagnostic.

    Raises:
        UnsupportedDestinationError: For destinations that can not yield a page.
        PageNotFoundError: If the page resolver does not know the page.
    """

    if node.page_number is not None:
        return node.page_number

    destination = node.destination
    if destination is None:
        return None

    if isinstance(destination, NamedDestination):
        if names is None:
            raise UnsupportedDestinationError(
                f"named destination {destination.name!r} can not be resolved without named destinations"
            )
        target = names.resolve(destination.name)
        if target is None:
            logger.warning("Named destination %r of %r not found", destination.name, node.title)
            return None
        if isinstance(target, int):
            return target
        destination = target

    if isinstance(destination, PageDestination):
        if pages is None:
            raise UnsupportedDestinationError("page destination can not be resolved without a page tree")
        return pages.page_number(destination.page)

    raise UnsupportedDestinationError(f"unsupported type of outline destination: {destination.kind}")


def tree_to_lines(
    roots: Iterable[OutlineNode],
    pages: PageResolver | None = None,
    names: NamedDestinationResolver | None = None,
    *,
    policy: DestinationPolicy = "skip",
) -> list[str]:
    """Convert outline trees to indented text lines (pre-order).

    Args:
        roots: Root nodes in document order.
        pages: Resolver for page destinations.
        names: Resolver for named destinations.
        policy: What to do with a node whose title or destination is unusable:
            `skip` drops it with its subtree, `promote` drops it and emits its
            children at its depth, `abort` re-raises.

    Returns:
        One line per emitted node.
    """

    lines: list[str] = []
    for root in roots:
        _emit(root, 0, lines, pages, names, policy)
    return lines


def _emit(
    node: OutlineNode,
    depth: int,
    lines: list[str],
    pages: PageResolver | None,
    names: NamedDestinationResolver | None,
    policy: DestinationPolicy,
) -> None:
    try:
        title = sanitize_title(node.title)
        page_number = resolve_page_number(node, pages, names)
    except (EmptyTitleError, DestinationError) as exc:
        if policy == "abort":
            raise
        logger.warning("Skipping outline item %r: %s", node.title, exc)
        if policy == "promote":
            for child in node.children:
                _emit(child, depth, lines, pages, names, policy)
        return

    lines.append(format_line(depth, title, page_number))
    for child in node.children:
        _emit(child, depth + 1, lines, pages, names, policy)


def lines_to_tree(
    lines: Iterable[str],
    *,
    page_count: int | None = None,
    strict_titles: bool = False,
) -> list[OutlineNode]:
    """Rebuild outline trees from indented text lines.

    Malformed (blank) lines are reported and dropped. Pages beyond `page_count`
    are dropped from their node with a diagnostic.

    Args:
        lines: Text lines in file order.
        page_count: Number of pages of the target document, if known.
        strict_titles: Re-raise `EmptyTitleError` instead of skipping the line.

    Returns:
        Root nodes in input order.
    """

    roots: list[OutlineNode] = []
    depths: list[float] = []
    nodes: list[OutlineNode | None] = []

    for index, line in enumerate(lines):
        node: OutlineNode | None = None
        depth: float = math.inf
        try:
            parsed = parse_line(line, index)
            raw_title, page_number = split_page_number(parsed.title)
            if page_number is not None and page_count is not None and page_number > page_count:
                logger.warning(
                    "Line %d: page %d is out of range (document has %d pages)",
                    index + 1,
                    page_number,
                    page_count,
                )
                page_number = None
            node = OutlineNode.from_title(raw_title, page_number)
            depth = parsed.depth
        except MalformedLineError as exc:
            logger.warning("Line %d: %s", index + 1, exc)
        except EmptyTitleError as exc:
            if strict_titles:
                raise
            logger.warning("Line %d: %s", index + 1, exc)

        depths.append(depth)
        nodes.append(node)
        if node is None:
            continue

        parent = _find_parent(depths, index)
        if parent is None:
            roots.append(node)
        else:
            nodes[parent].children.append(node)  # type: ignore[union-attr]

    return roots


def _find_parent(depths: list[float], index: int) -> int | None:
    depth = depths[index]
    position = index - 1
    while position >= 0 and depths[position] >= depth:
        position -= 1
    return position if position >= 0 else None
