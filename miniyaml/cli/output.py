"""
Output formatting for CLI commands.

Block trees are shown either as their debug rendering or as a rich
:class:`~rich.tree.Tree`, one node per mapping key or sequence item.
"""

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from miniyaml.block import Block
from miniyaml.errors import MiniYamlError

console = Console()
err_console = Console(stderr=True)


def _literal_label(block: Block) -> str:
    return "'" + block.as_string().replace("\n", "\\n") + "'"


def _node_label(name: str, block: Block) -> Text:
    label = Text(name, style="bold blue")
    if block.is_literal():
        label.append(" = ")
        label.append(_literal_label(block), style="green")
    else:
        label.append(f" ({block.kind.value})", style="dim")
    return label


def _add_children(node: Tree, block: Block) -> None:
    if block.is_mapping():
        children = list(block.mapping_view().items())
    elif block.is_sequence():
        children = [(f"- [{index}]", item) for index, item in enumerate(block.sequence_view())]
    else:
        return
    for name, child in children:
        branch = node.add(_node_label(name, child))
        _add_children(branch, child)


def build_tree(block: Block, label: str = "document") -> Tree:
    """Build a rich tree mirroring ``block``."""
    tree = Tree(_node_label(label, block))
    _add_children(tree, block)
    return tree


def print_error(error: Exception) -> None:
    """Print an error in red without interpreting it as rich markup."""
    detail = error.format() if isinstance(error, MiniYamlError) else str(error)
    err_console.print(Text(f"Error: {detail}", style="red"), soft_wrap=True)
