"""
Model registry for the brands app.

Django discovers models through this module; definitions live in the
infrastructure layer.
"""

from brands.infrastructure.models import Brand  # noqa: F401
