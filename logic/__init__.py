"""
Camp domain logic: persistence, occupancy and activity logging.

Date: 2026-10-19
"""
