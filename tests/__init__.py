"""
Test suite for the rttrim package.

This package contains unit tests and integration tests for:
- The critical-value table
- Per-cell trimming procedures
- The grouping driver and public procedures
"""
