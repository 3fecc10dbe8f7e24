"""Coordinator dashboard.

Camp capacity and dispatch status (``camps``), headline statistics and
camp freshness (``camp_status``), and stock rebalancing (``resources``).
"""
