"""
Token rendering for title patterns.
"""
