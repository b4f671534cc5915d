"""
Pure checks on request payloads, run by the routers before any database work.
"""
