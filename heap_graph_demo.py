#!/usr/bin/python

import logging
import sys

from heap import MaxHeapPriorityQueue
from graph import UndirectedGraph


DEFAULT_VALUES = [50, 30, 10, 40, 20, 100, 70, 90, 60, 80]

DEFAULT_NODES = [0, 1, 2, 3, 4, 5]
DEFAULT_EDGES = [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5)]

USAGE = "usage: heap_graph_demo.py [heap [value ...] | graph [start] | all]"


def heap_demo(values, file=None):
    pq = MaxHeapPriorityQueue()

    for value in values:
        print(value, end=" ", file=file)
        pq.insert(value)
        pq.dump(file=file)
    print(file=file)

    print(pq.size(), "elements in priority Q", file=file)

    while not pq.is_empty():
        print("Priority Q not empty.", file=file)
        pq.dump(file=file)
        print("Top element:", pq.peek_max(), file=file)
        print("Popping", file=file)
        pq.remove_max()

    print("Priority Q empty.", file=file)
    print("Top element anyway:", pq.peek_max(), file=file)
    return pq


def graph_demo(start=0, file=None):
    g = UndirectedGraph(DEFAULT_NODES)
    for u, v in DEFAULT_EDGES:
        g.add_edge(u, v)

    g.print_adjacency_list(file=file)
    print(file=file)
    g.print_adjacency_matrix(file=file)

    for title, traversal in [("DFS Preorder Traversal", g.preorder),
                             ("DFS Postorder Traversal", g.postorder),
                             ("DFS Inorder Traversal (simulated)", g.inorder)]:
        print("\n" + title + ":", file=file)
        print(" ".join(str(node) for node in traversal(start)), file=file)
    return g


def main(argv, file=None):
    mode = argv[0] if argv else "all"
    args = argv[1:]

    if mode == "heap":
        values = [int(a) for a in args] if args else DEFAULT_VALUES
        heap_demo(values, file=file)
    elif mode == "graph":
        start = int(args[0]) if args else DEFAULT_NODES[0]
        graph_demo(start, file=file)
    elif mode == "all" and not args:
        heap_demo(DEFAULT_VALUES, file=file)
        print(file=file)
        graph_demo(file=file)
    else:
        print(USAGE, file=file)
        return 2
    return 0

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    sys.exit(main(sys.argv[1:]))
