"""Tree renderer: an ErrorChain as an indented diagnostic string.

    ProfileError.caught
    └─ DatabaseError.load_failed(table: movies)
       └─ FileError.file_not_found(file_name: movies.db)
          └─ userFriendlyMessage: "The file movies.db could not be located."
"""

from __future__ import annotations

from errkit.core.config import DEFAULT_CONNECTOR, DEFAULT_INDENT

from .model import ErrorChain

__all__ = ["render", "render_lines", "MESSAGE_LABEL"]

MESSAGE_LABEL = "userFriendlyMessage"


def render_lines(
    chain: ErrorChain,
    *,
    indent: str = DEFAULT_INDENT,
    connector: str = DEFAULT_CONNECTOR,
) -> list[str]:
    """One line per node, then the leaf message line."""
    lines: list[str] = []
    for depth, node in enumerate(chain):
        lines.append(_prefix(depth, indent, connector) + node.label)
    message_depth = len(chain)
    lines.append(
        _prefix(message_depth, indent, connector)
        + f'{MESSAGE_LABEL}: "{chain.leaf.leaf_message}"'
    )
    return lines


def render(
    chain: ErrorChain,
    *,
    indent: str = DEFAULT_INDENT,
    connector: str = DEFAULT_CONNECTOR,
) -> str:
    return "\n".join(render_lines(chain, indent=indent, connector=connector))


def _prefix(depth: int, indent: str, connector: str) -> str:
    if depth == 0:
        return ""
    return indent * (depth - 1) + connector
