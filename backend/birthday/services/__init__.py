"""Services Layer — repository, interactors, and the name auto-save coordinator.

Invariants:
    - Interactors are the only place outcomes become user-visible text
    - Services depend on core/ protocols, never on a concrete store
"""
