"""Classic data structures and algorithms for study and experimentation."""

__version__ = "0.1.0"

__all__ = [
    "core",
    "sqlist",
    "intlist",
    "intstack",
    "intqueue",
    "sqqueue",
    "linkqueue",
    "linkedlist",
    "dlinkedlist",
    "huffman",
    "search",
    "binarytree",
    "bst",
    "graph",
    "matrixgraph",
    "listgraph",
    "sorting",
    "strconvert",
    "split",
    "worker",
]