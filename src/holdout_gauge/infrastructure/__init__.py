"""
Infrastructure Layer

Adapters for external collaborators such as model libraries.
"""
