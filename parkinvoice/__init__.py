"""
parkinvoice - per-customer parking invoices from hourly tariff tables.
"""

__version__ = "0.1.0"
