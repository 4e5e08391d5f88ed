"""Library Catalog - Services Package

This package contains the delivery capabilities used by the catalog:
- Notification channels for loan and return confirmations
- Subscribers notified when new books are cataloged
"""
