"""
Core infrastructure: settings, logging, errors, the record store and
domain event dispatching.
"""
