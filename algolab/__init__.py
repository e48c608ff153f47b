"""Classic data structures and algorithms: lists, stacks, queues, heaps, hashing,
sorting, sparse matrices, graphs, shortest paths, spanning trees and job scheduling."""

__version__ = "0.1.0"

__all__ = [
    "sorting",
    "hashing",
    "dp",
    "scheduling",
    "union_find",
    "linked_list",
    "seq_list",
    "circular_queue",
    "static_list",
    "seq_stack",
    "trains",
    "min_heap",
    "polynomial",
    "sparse_matrix",
    "cross_list",
    "gen_list",
    "graph",
    "undirected_graph",
    "topo_sort",
    "networks",
    "spanning_tree",
    "critical_path",
    "shortest_path",
]