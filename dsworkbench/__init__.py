"""Classic data structures: search trees, disjoint sets, linked stacks and lists, Huffman trees and threaded trees."""

__version__ = "0.1.0"