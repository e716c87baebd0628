"""Small, capacity-bounded data structures: arrays, linked lists, stacks, queues, hash tables and binary trees."""

__version__ = "0.1.0"
__all__ = [
    "fixed_array",
    "linked_list",
    "stack",
    "bounded_queue",
    "hash_table",
    "binary_tree",
]