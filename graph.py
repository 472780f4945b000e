# Undirected graph over a fixed set of integer node labels, stored both as an
# adjacency list and as an adjacency matrix, with depth-first traversals.

import logging

import numpy as np
from matplotlib.collections import LineCollection


class UndirectedGraph:
    def __init__(self, nodes):
        self.nodes = list(nodes)
        # Neighbour indices per node, in insertion order
        self.adjacency = [[] for _ in self.nodes]
        self.matrix = np.zeros((len(self.nodes), len(self.nodes)), dtype=int)

    def __str__(self):
        return "UndirectedGraph(nodes=" + str(self.nodes) + \
            ", edges=" + str(self.edges) + ")"

    @property
    def num_nodes(self): return len(self.nodes)

    @property
    def num_edges(self): return len(self.edges)

    @property
    def edges(self):
        """
        Each undirected edge once, as a (u, v) pair of labels, ordered by the
        index of u and then by insertion order of v.
        """
        edges = []
        for i, neighbors in enumerate(self.adjacency):
            for j in neighbors:
                if i <= j:
                    edges.append((self.nodes[i], self.nodes[j]))
        return edges

    def node_index(self, node):
        """
        Index of the first node carrying the given label.
        :raises ValueError: if no node has that label
        """
        return self.nodes.index(node)

    def neighbors(self, node):
        return [self.nodes[j] for j in self.adjacency[self.node_index(node)]]

    def has_edge(self, u, v):
        return bool(self.matrix[self.node_index(u), self.node_index(v)])

    def add_edge(self, u, v):
        u_idx = self.node_index(u)
        v_idx = self.node_index(v)

        if v_idx not in self.adjacency[u_idx]:
            self.adjacency[u_idx].append(v_idx)
        if u_idx not in self.adjacency[v_idx]:
            self.adjacency[v_idx].append(u_idx)

        self.matrix[u_idx, v_idx] = 1
        self.matrix[v_idx, u_idx] = 1

        assert (v_idx in self.adjacency[u_idx] and
                u_idx in self.adjacency[v_idx] and
                self.matrix[u_idx, v_idx] == self.matrix[v_idx, u_idx] == 1)
        logging.debug("Added edge {} -- {}".format(u, v))

    def print_adjacency_list(self, file=None):
        print("Adjacency List:", file=file)
        for i, node in enumerate(self.nodes):
            print("{}:".format(node),
                  " ".join(str(self.nodes[j]) for j in self.adjacency[i]),
                  file=file)

    def print_adjacency_matrix(self, file=None):
        print("Adjacency Matrix:", file=file)
        for row in self.matrix:
            print(" ".join(str(x) for x in row), file=file)

    def preorder(self, start):
        """Depth-first, each node emitted before its unvisited neighbours."""
        order = []
        root = self.node_index(start)
        visited = {root}
        order.append(self.nodes[root])
        stack = [iter(self.adjacency[root])]
        while stack:
            for j in stack[-1]:
                if j not in visited:
                    visited.add(j)
                    order.append(self.nodes[j])
                    stack.append(iter(self.adjacency[j]))
                    break
            else:
                stack.pop()
        return order

    def postorder(self, start):
        """Depth-first, each node emitted after all its unvisited neighbours."""
        order = []
        root = self.node_index(start)
        visited = {root}
        stack = [(root, iter(self.adjacency[root]))]
        while stack:
            i, neighbors = stack[-1]
            for j in neighbors:
                if j not in visited:
                    visited.add(j)
                    stack.append((j, iter(self.adjacency[j])))
                    break
            else:
                stack.pop()
                order.append(self.nodes[i])
        return order

    def inorder(self, start):
        """
        Simulated inorder traversal. A general graph has no left and right
        subtrees, so the neighbours of each node are sorted by index and split
        at floor(count/2): the unvisited lower half is explored first, then the
        node is emitted, then the unvisited upper half is explored.
        """
        order = []
        root = self.node_index(start)
        visited = {root}
        # Frames are [node index, sorted neighbours, position, emitted]
        stack = [[root, sorted(self.adjacency[root]), 0, False]]
        while stack:
            frame = stack[-1]
            i, neighbors, position, emitted = frame
            if not emitted and position == len(neighbors) // 2:
                order.append(self.nodes[i])
                frame[3] = True
            if position == len(neighbors):
                stack.pop()
                continue
            frame[2] += 1
            j = neighbors[position]
            if j not in visited:
                visited.add(j)
                stack.append([j, sorted(self.adjacency[j]), 0, False])
        return order

    def layout(self):
        """Node positions spaced evenly on the unit circle, in node order."""
        angles = 2 * np.pi * np.arange(self.num_nodes) / max(self.num_nodes, 1)
        return np.column_stack([np.cos(angles), np.sin(angles)])

    def edge_lines(self, **kwargs):
        pos = self.layout()
        return LineCollection([
            [pos[self.node_index(u)], pos[self.node_index(v)]]
            for u, v in self.edges
        ], **kwargs)
