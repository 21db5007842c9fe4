"""Core Layer — pure domain rules and types, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure and deterministic (time is passed in, never read,
      except clock.utcnow)

Design Decisions:
    - Functional core separated from the imperative shell: services fetch rows,
      core decides, services persist
"""
