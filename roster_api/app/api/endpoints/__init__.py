"""
Endpoint subpackage.

Each module defines an ``APIRouter``; they are combined in
``api/router.py``.
"""
