"""
Application-level support: errors, configuration and analysis contexts.
"""
