"""
Domain layer package.

Contains pure business logic: entities, access rules and port
interfaces. No framework imports, no IO, no side effects.
"""
