"""
Events and the composed event detail view.
"""
