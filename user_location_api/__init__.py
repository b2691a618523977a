"""
Users Location API package
"""
