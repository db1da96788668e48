"""
Beadboard - Interfaces Package
==============================

Contains all user-facing interfaces (presentation layer).

Structure:
- api/: FastAPI HTTP interface serving the dashboard and its JSON API
- cli/: Rich console output for the server starter
"""
