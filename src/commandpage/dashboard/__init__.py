"""HTTP dashboard module for commandpage.

Turns a Configuration into live HTTP handlers: an index page, one
handler per configured command, and static-file mounts.
"""
