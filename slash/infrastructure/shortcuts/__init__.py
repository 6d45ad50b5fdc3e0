"""
Infrastructure adapters for the shortcuts bounded context.
"""
