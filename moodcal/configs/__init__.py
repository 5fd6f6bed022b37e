"""
configs package
---------------
Default vocabularies and calendar conventions.
"""
