"""
Services module - MongoDB-backed repositories and the pure transforms
that shape their documents for the API.
"""
