"""
Event Registration Service
Student registration for events with QR check-in tokens and email confirmation.
"""

__version__ = "1.0.0"
