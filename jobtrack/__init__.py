"""
Jobtrack

Job-application tracking API.
"""

__version__ = "1.0.0"
