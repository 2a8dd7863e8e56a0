from .vectorized import PackedTriangles

__all__ = ['PackedTriangles']
