"""
Shared utilities: exceptions, logging, configuration and DataFrame guards.
"""
