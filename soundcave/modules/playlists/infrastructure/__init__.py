"""
Infrastructure layer: persistence and external integrations.
"""
