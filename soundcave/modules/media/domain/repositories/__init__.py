"""
Repository interfaces. Implementations live in the infrastructure layer.
"""
