"""
API package containing the HTTP routes.

``router.py`` aggregates the endpoint modules into a single router
which ``main.create_app`` mounts at the application root.
"""
