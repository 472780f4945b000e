import io
import unittest

import heap_graph_demo as demo


class TestHeapGraphDemo(unittest.TestCase):
    def test_heap_demo(self):
        out = io.StringIO()
        self.assertEqual(demo.main(["heap"], file=out), 0)

        lines = out.getvalue().splitlines()
        self.assertEqual(lines[0],
                         "50 Priority Queue elements in descending order: 50")
        self.assertIn("10 elements in priority Q", lines)
        self.assertIn("Top element: 100", lines)
        self.assertEqual(lines[-2], "Priority Q empty.")
        self.assertEqual(lines[-1], "Top element anyway: -1")

    def test_heap_demo_values(self):
        out = io.StringIO()
        pq = demo.heap_demo([3, 8, 1], file=out)

        self.assertTrue(pq.is_empty())
        tops = [line for line in out.getvalue().splitlines()
                if line.startswith("Top element:")]
        self.assertEqual(tops, ["Top element: 8", "Top element: 3",
                                "Top element: 1"])

    def test_graph_demo(self):
        out = io.StringIO()
        self.assertEqual(demo.main(["graph"], file=out), 0)

        lines = out.getvalue().splitlines()
        self.assertEqual(lines[0], "Adjacency List:")
        i = lines.index("DFS Preorder Traversal:")
        self.assertEqual(lines[i + 1], "0 1 3 4 2 5")
        i = lines.index("DFS Postorder Traversal:")
        self.assertEqual(lines[i + 1], "3 4 1 5 2 0")
        i = lines.index("DFS Inorder Traversal (simulated):")
        self.assertEqual(lines[i + 1], "1 3 4 0 2 5")

    def test_graph_demo_start(self):
        out = io.StringIO()
        demo.main(["graph", "2"], file=out)

        lines = out.getvalue().splitlines()
        i = lines.index("DFS Preorder Traversal:")
        self.assertEqual(lines[i + 1], "2 0 1 3 4 5")

    def test_all(self):
        out = io.StringIO()
        self.assertEqual(demo.main([], file=out), 0)

        text = out.getvalue()
        self.assertIn("Top element anyway: -1", text)
        self.assertIn("Adjacency Matrix:", text)

    def test_usage(self):
        out = io.StringIO()
        self.assertEqual(demo.main(["bfs"], file=out), 2)
        self.assertEqual(out.getvalue().strip(), demo.USAGE)


if __name__ == '__main__':
    unittest.main()
