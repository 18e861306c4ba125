"""
State management modules for the dashboard UI.

Immutable table and form states kept in dcc.Store components, with pure
transitions that the controllers apply.
"""
