"""
CineSuggest: movie recommendations from a free-text list of movies you love.

The FastAPI app lives in ``cinesuggest.main``.
"""

__version__ = "0.1.0"
