"""
UI-independent core and the Quart host.
"""
