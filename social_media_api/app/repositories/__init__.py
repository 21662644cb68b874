"""
Data access layer.

Each repository encapsulates the SQL for one table and returns schema
objects.  Services receive repository instances in their constructor
and never touch ``sqlite3`` directly.
"""
