"""Services Layer — query and rule logic per resource, called by thin routes.

Invariants:
    - Services raise PizzaError subclasses; they never build HTTP responses
    - Each write commits its own unit of work

Design Decisions:
    - One module per admin resource for locality (no god objects)
"""
