import sys
from pathlib import Path
from typing import Optional
import networkx as nx
from linetimer import linetimer
from ..custom_types import SpanningTree, UnknownAlgorithmError
from ..modules.spanning_tree import SPANNING_TREE_ALGORITHMS, compute_spanning_tree, get_algorithm
from ..modules.utils import check_spanning_forest, gen_random_weighted_graph, weights_match
import consts
import run_config
import logging
logger = logging.getLogger(__name__)

"""
usage: python -m spanforest.bin.main [EDGELIST_FILE] [ALGORITHM] [OUTPUT_FILE]

EDGELIST_FILE holds one "u v weight" line per edge; parallel edges and
self-loops are kept. Without it a random graph is generated from the sizes in
run_config. ALGORITHM defaults to run_config.ALGORITHM. When OUTPUT_FILE is
given the selected edges are written to it in the same edge list format.
"""


def load_graph(edgelist_file: Optional[Path]) -> nx.MultiGraph:
    if edgelist_file is None:
        logger.info(f"generating random graph with {run_config.RANDOM_N_NODES} nodes, edge probability {run_config.RANDOM_EDGE_PROB}")
        return gen_random_weighted_graph(run_config.RANDOM_N_NODES, run_config.RANDOM_EDGE_PROB, run_config.RANDOM_SEED)
    logger.info(f"loading graph from {edgelist_file}")
    return nx.read_weighted_edgelist(edgelist_file, comments=consts.EDGELIST_COMMENT, create_using=nx.MultiGraph)


def cross_check(graph: nx.MultiGraph, tree: SpanningTree, algorithm: str) -> bool:
    """Recomputes the forest with every other registered algorithm and compares total weights."""

    ok = check_spanning_forest(graph, tree)
    for other in SPANNING_TREE_ALGORITHMS:
        if other == algorithm:
            continue
        other_tree: SpanningTree = compute_spanning_tree(graph, other)
        if not weights_match(tree.weight, other_tree.weight):
            logger.error(f"{algorithm} weight {tree.weight} differs from {other} weight {other_tree.weight}")
            ok = False
    return ok


@linetimer(name="computing minimum spanning forest", logger_func=logger.info)
def main(argv: list[str]) -> int:
    edgelist_file = Path(argv[0]) if len(argv) > 0 else None
    algorithm = argv[1] if len(argv) > 1 else run_config.ALGORITHM
    output_file = Path(argv[2]) if len(argv) > 2 else None

    try:
        get_algorithm(algorithm)
        graph: nx.MultiGraph = load_graph(edgelist_file)
    except (UnknownAlgorithmError, OSError, TypeError, ValueError, IndexError) as e:
        logger.error(e)
        return 1

    tree: SpanningTree = compute_spanning_tree(graph, algorithm)
    if not cross_check(graph, tree, algorithm):
        return 1

    for u, v, w in graph.edge_subgraph(tree.edges).edges(data=consts.WEIGHT_ATTR):
        print(f"{u} {v} {w}")
    print(f"total weight: {tree.weight}")

    if output_file is not None:
        logger.info(f"saving spanning forest to {output_file}")
        output_file.parent.mkdir(exist_ok=True, parents=True)
        nx.write_weighted_edgelist(graph.edge_subgraph(tree.edges), output_file)
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=run_config.LOGGING_LEVEL)
    sys.exit(main(sys.argv[1:]))
