"""Database Package — declarative base shared by models and migrations.

Invariants:
    - Engine/session lifecycle lives in infrastructure/database.py, not here
"""
