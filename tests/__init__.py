"""
Test Suite

Unit, repository and API tests for the Jobtrack application.
"""
