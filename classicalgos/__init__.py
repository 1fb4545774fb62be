"""Classic algorithm programs: graph search, hashed AVL client groups, radix sort and translation."""

__version__ = "0.1.0"
__all__ = ["client_groups", "command_chain", "radix", "translator"]