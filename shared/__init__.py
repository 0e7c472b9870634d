"""
Payload helpers and entry records shared by the list handlers.
"""
