"""Core Layer — pure domain logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Enforcement functions are pure and deterministic given a reference snapshot

Design Decisions:
    - Functional core separated from imperative shell: the shell fetches reference
      data, the core only reads the snapshot it is handed
"""
