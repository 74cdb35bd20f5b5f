"""chainlist - Persistent singly-linked list with a null-object seed node."""

from chainlist.errors import ChainListError, IndexOutOfRangeError
from chainlist.linkedlist import LinkedList, Node

__version__ = "0.0.1"

__all__ = [
    "LinkedList",
    "Node",
    "ChainListError",
    "IndexOutOfRangeError",
]
