"""
render package
--------------
Text rendering of the diary views.
"""
