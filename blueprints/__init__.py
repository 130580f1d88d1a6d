"""
Blueprints Package - Modular application structure
Each blueprint handles a specific area of the JSON API
"""

__all__ = ['auth', 'portfolio', 'content']
