"""
HTML presentation of the recommendation flow.
"""

from .render import PageView, build_page_view, render_page

__all__ = ["PageView", "build_page_view", "render_page"]
