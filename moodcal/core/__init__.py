"""
core package
------------
Shared infrastructure: paths, exceptions, logging, validation and config.
"""
