"""
Application layer for the shortcuts bounded context.

Use cases coordinate domain entities and the store port to fulfill
the list/get/create/update/delete operations.
"""
