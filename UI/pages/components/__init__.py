"""
Reusable layout components for the dashboard pages.
"""
from UI.pages.components.entry_form_modal import entry_form_modal
from UI.pages.components.navbar import navbar
