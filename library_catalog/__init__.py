"""Library Catalog - Core Application Package

This package contains the core application modules including:
- Catalog and loan management (library.py)
- Data models (book.py, loan.py)
- Notification channels and subscribers (services/)
- CLI interface (main.py)
- Settings and logging setup (config.py)
"""
