"""Family search.

Edit-distance primitives (``fuzzy``) and the scored registrant lookup
behind the "find family member" screen (``family_search``).
"""
