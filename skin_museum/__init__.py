"""
Winamp Skin Museum catalog service.

Lookup, listing, filtering and museum-ordered browsing over the skin archive.
"""
