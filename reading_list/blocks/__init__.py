"""
Dynamic blocks: metadata, registration and server-side rendering.
"""

from .router import router as blocks_router  # noqa: F401
