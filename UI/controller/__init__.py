"""
UI Controllers Package

Centralized controllers for the dashboard's interactive state.

Controllers:
- entry_table_controller: master callback for the entries table plus the
  form and delete flows that feed it
- entry_actions: requests against the entries endpoint
- entry_table_events: event-to-transition mapping used by the master callback
"""
