"""
Recipe Organizer - recipe extraction service.

Turns pasted recipe text or a recipe web page into a structured recipe
(title, ingredients, steps, cuisine, image, source URL) using an
Azure OpenAI deployment.
"""

__version__ = "1.0.0"
