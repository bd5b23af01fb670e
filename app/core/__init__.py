"""
Core module - configuration, authentication and error types.
"""
