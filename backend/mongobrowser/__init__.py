"""
Mongo Browser - HTTP browsing of MongoDB collections through registered sessions.
"""
