"""
Domain layer for the orders API client models.

This layer contains the value objects exchanged with the orders API
and the enumerations of their known wire values.
"""
