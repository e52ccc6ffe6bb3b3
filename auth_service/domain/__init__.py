"""
Domain layer: value objects, the ProductUser / UserProfile aggregates and the
abstract collaborators (repository, token service) the use cases depend on.
"""
