"""
Infrastructure

HTTP, OAuth and endpoint implementations.
"""
