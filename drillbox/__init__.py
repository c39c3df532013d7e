"""Classic programming drills: number checks, text, searching, sorting, matrices, flags, an arena, a counter, queues, a stack, a tree and student records."""

__version__ = "0.1.0"