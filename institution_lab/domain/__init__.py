"""
Domain layer - Contains the institution entity, value objects, and the ordering, sorting and search services.
This layer is independent of external concerns and contains the core logic.
"""
