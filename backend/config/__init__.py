"""
Config package for the wedding site project: settings, URLs and the
WSGI/ASGI entry points.
"""
