"""
Core server configuration.

Settings loaded from the environment and the constants shared by the routers.
"""
