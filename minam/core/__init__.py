"""
Core models, parsing, configuration and check infrastructure
"""
