"""
Service layer abstraction.

Services encapsulate business rules.  They receive a repository at
construction time, so the in‑memory store used by default can be
swapped for another backend without changing API handlers.
"""
