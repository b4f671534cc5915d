"""
Pure functions reshaping persisted records into response schemas.
"""
