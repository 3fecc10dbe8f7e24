"""Rescue prioritization.

Groups free-text "trapped" reports into clusters that share vocabulary
(``clustering``) and lists medical emergencies beside them (``triage``).
"""
