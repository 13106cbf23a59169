"""Linked list, red-black tree, graphs, a priority queue and a shortest-route finder."""

__version__ = "0.1.0"
__all__ = ["cli", "graph", "hashing", "linked_list", "priority_queue", "rbtree", "weighted_graph"]