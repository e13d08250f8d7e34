"""
Content API service.
"""
