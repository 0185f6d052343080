"""commandpage -- a configuration-driven HTTP command dashboard.

Reads a YAML list of named shell commands and static-file mounts,
exposes each as an HTTP route and renders an index page linking to
them. Visiting a command route runs the program and shows its output.
"""

__version__ = "0.1.0"
