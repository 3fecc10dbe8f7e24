"""Registration records.

``RegistrantRecord`` is the read-only input to every computation in
ReliefLink; ``MatchResult`` is a record with a family-search score.
"""
