"""
Service layer abstraction.

Services encapsulate lookup logic over the roster so that API handlers
only deal with request parsing and response formatting.
"""
