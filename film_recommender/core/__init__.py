"""
Core recommendation logic, independent of the HTTP layer.
"""
