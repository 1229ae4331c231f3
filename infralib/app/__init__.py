"""Application composition layer.

Controllers in this package wire adapters and use cases from settings so the
web runtime never constructs transport objects itself.
"""
