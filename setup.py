from setuptools import setup

setup(
    name = "heap-graph-structures",
    version = "0.1.0",
    py_modules = ["heap", "graph", "heap_graph_demo"],
    install_requires = ["numpy", "matplotlib"],
    extras_require = {"test": ["pytest"]},
)
