"""
Server modules for the hunting camp dashboard.

This package contains the FastAPI router modules for stands, hunters, the
activity feed, admin maintenance and the weather proxy.

Date: 2026-10-19
"""
