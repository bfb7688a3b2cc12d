"""
Domain layer: entities, repository interfaces and business services.
"""
