"""Domain services - election rules applied to an ElectionState.

Each mutating rule validates every precondition before it writes, and
returns the notifications the application layer emits after commit.
"""
