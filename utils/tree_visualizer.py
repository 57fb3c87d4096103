# utils/tree_visualizer.py
# This file is part of Lumen - A Propositional Formula Engine
#
# Graphviz rendering of formula trees annotated with positions and polarity

import os

from graphviz import Digraph

from core.polarity import AnnotatedNode, Polarity, annotate_polarity, annotated_nodes
from parser.ast_nodes import Expr, Binary, Not
from utils.logger import get_logger

logger = get_logger(__name__)

VISUALIZATION_OUTPUT_FOLDER = "tree_visualizations"

POLARITY_COLORS = {
    Polarity.POSITIVE: "palegreen",
    Polarity.NEGATIVE: "lightcoral",
    Polarity.MIXED: "lightgrey",
}


def _node_id(position: str) -> str:
    return "root" if not position else "p_" + position.replace(".", "_")


def _node_label(annotated: AnnotatedNode) -> str:
    node = annotated.node
    if isinstance(node, (Binary, Not)):
        symbol = node.operator
    else:
        symbol = str(node)
    position = annotated.position or "ε"
    return f"{symbol}\n{position} [{annotated.polarity_name}]"


def build_tree_graph(tree: Expr, fmt: str = "png") -> Digraph:
    """Build the graphviz graph of ``tree`` without rendering it.

    Every node shows its connective or leaf, its position and its polarity,
    and is coloured by polarity. Edges are labelled with the step (1 or 2).
    """
    annotated = annotate_polarity(tree)

    dot = Digraph(comment=f"Formula tree for {tree}", format=fmt)
    dot.attr(rankdir="TB", nodesep="0.4", ranksep="0.5")
    dot.attr("node", shape="circle", style="filled", fontsize="11")

    for node in annotated_nodes(annotated):
        dot.node(
            _node_id(node.position),
            _node_label(node),
            fillcolor=POLARITY_COLORS[node.polarity_name],
        )
        for step, child in enumerate(node.children, start=1):
            dot.edge(_node_id(node.position), _node_id(child.position), label=str(step))

    return dot


def visualize_formula_tree(tree: Expr, base_filename: str, fmt: str = "png") -> None:
    """Render the annotated tree of ``tree`` into the visualisation folder.

    Args:
        tree: Formula to draw
        base_filename: The base name for the output file
        fmt: The output format for the image (e.g., "png", "svg")
    """
    dot = build_tree_graph(tree, fmt)

    if not os.path.exists(VISUALIZATION_OUTPUT_FOLDER):
        try:
            os.makedirs(VISUALIZATION_OUTPUT_FOLDER)
            logger.info(f"Created directory for tree visualizations: {VISUALIZATION_OUTPUT_FOLDER}")
            output_path = os.path.join(VISUALIZATION_OUTPUT_FOLDER, base_filename)
        except OSError as e:
            logger.error(f"Could not create directory {VISUALIZATION_OUTPUT_FOLDER}: {e}. "
                         f"Saving to current directory instead.")
            output_path = base_filename
    else:
        output_path = os.path.join(VISUALIZATION_OUTPUT_FOLDER, base_filename)

    try:
        dot.render(output_path, view=False, cleanup=True)
        logger.info(f"Formula tree visualization saved to {output_path}.{fmt}")
    except Exception as e:
        logger.warning(f"Failed to render formula tree to {output_path}.{fmt}: {e}. "
                       f"Ensure Graphviz executables are installed and in your system PATH.")
