"""
Command-line hosts for the travel recommendation core.
"""
