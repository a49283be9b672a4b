"""
Core of glive: models, interfaces, settings and the service container.
"""
