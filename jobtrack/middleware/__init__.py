"""
Middleware Package

Request context and error handling for the FastAPI application.
"""
