"""
Travel recommendation widget: catalog loading, keyword search and result rendering.
"""
