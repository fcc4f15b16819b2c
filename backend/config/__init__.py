"""
Project configuration package: settings, root URL routing and WSGI entry point.
"""
