"""
Domain services holding the business rules and transaction boundaries.
"""
