"""Task Board Application Package: users, boards, lists, cards and their associations.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
