"""Visitor Desk package.

Feature modules (users, visitors, library, reports) with thin Flask
controllers on top of service and repository layers.
"""
