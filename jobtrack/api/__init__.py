"""
API Package

HTTP endpoints and their dependencies.
"""
