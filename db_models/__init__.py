"""
Database models for the dashboard application.
"""
