"""Internal implementation package for segtri.

Modules here may be reorganized; import public names from ``segtri``.
"""
