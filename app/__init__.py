"""
ScreenScout application package.

Movie and TV discovery service: TMDB catalog proxy, user favorites and a
recommendation pipeline with generative and keyword fallbacks.
"""

__version__ = "1.0.0"
