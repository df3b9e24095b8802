"""
Web module.

JSON content API for the site's rendering layer.
"""
