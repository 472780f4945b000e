# Binary max-heap priority queue of integers, after the array layout used in
# Sedgewick and Wayne's MaxPQ.java: http://algs4.cs.princeton.edu/24pq/MaxPQ.java
# but rooted at index 0, so parent(i) = (i-1)//2 and children are 2i+1, 2i+2.

import array
import logging

# Returned by peek_max() when the queue is empty
EMPTY = -1


def parent(i):
    return (i - 1) // 2


def left_child(i):
    return 2 * i + 1


def right_child(i):
    return 2 * i + 2


def sift_down(pq, k, n):
    """
    Move pq[k] down until neither child within pq[:n] is larger.
    The larger child is chosen; on a tie the left child wins.
    """
    while left_child(k) < n:
        j = left_child(k)
        if j + 1 < n and pq[j] < pq[j + 1]:
            j += 1
        if not pq[k] < pq[j]:
            break
        pq[k], pq[j] = pq[j], pq[k]
        k = j


class MaxHeapPriorityQueue:
    def __init__(self, values=()):
        self.pq = array.array('i')
        for value in values:
            self.insert(value)

    def __len__(self):
        return len(self.pq)

    def __iter__(self):
        return iter(self.pq)

    def __str__(self):
        return "MaxHeapPriorityQueue(" + str(list(self.pq)) + ")"

    @property
    def elements(self): return list(self.pq)

    def is_empty(self):
        return len(self.pq) == 0

    def size(self):
        return len(self.pq)

    def peek_max(self):
        if self.is_empty():
            logging.error("Priority Queue is empty.")
            return EMPTY
        return self.pq[0]

    def insert(self, value):
        self.pq.append(value)
        self.swim(len(self.pq) - 1)
        logging.debug("{} has been added to the Priority Queue.".format(value))

    def remove_max(self):
        """
        Replace the root with the last element and sink it back into place.
        :return: False if the queue was empty and nothing was removed
        """
        if self.is_empty():
            logging.error("Cannot pop from an empty Priority Queue.")
            return False

        last = self.pq.pop()
        if self.pq:
            self.pq[0] = last
            self.sink(0)
        logging.debug("Top element has been popped from the Priority Queue.")
        return True

    def pop(self):
        if self.is_empty():
            logging.error("Cannot pop from an empty Priority Queue.")
            return None
        max = self.pq[0]
        self.remove_max()
        return max

    def drain_descending(self):
        """
        Extract every element from a copy of the heap, largest first.
        The queue itself is left untouched.
        """
        copy = array.array('i', self.pq)
        n = len(copy)
        result = []
        while n > 0:
            result.append(copy[0])
            n -= 1
            copy[0] = copy[n]
            sift_down(copy, 0, n)
        return result

    def dump(self, file=None):
        if self.is_empty():
            print("Priority Queue is empty.", file=file)
        else:
            print("Priority Queue elements in descending order:",
                  " ".join(str(v) for v in self.drain_descending()), file=file)

    def is_heap(self):
        return all(not self.less(parent(i), i) for i in range(1, len(self.pq)))

    def less(self, i, j):
        return self.pq[i] < self.pq[j]

    def swim(self, k):
        while k > 0 and self.less(parent(k), k):
            self.exchange(k, parent(k))
            k = parent(k)

    def sink(self, k):
        sift_down(self.pq, k, len(self.pq))

    def exchange(self, i, j):
        temp = self.pq[i]
        self.pq[i] = self.pq[j]
        self.pq[j] = temp
