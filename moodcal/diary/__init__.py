"""
diary package
-------------
Calendar grid, record store and the view-mode session.
"""
