"""
Core Package

Configuration, database, security and exception definitions.
"""
