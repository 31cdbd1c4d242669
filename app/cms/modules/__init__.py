"""
Content type modules live under this package.

Each module owns its content types and registers them with the
ContentRegistry; the editor, RBAC and request plumbing are shared.
"""
