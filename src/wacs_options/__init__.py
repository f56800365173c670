"""wacs-options — command-line options model for a certificate-automation tool.

Turns a raw argument vector into a validated, immutable options record
consumed by the rest of the workflow.
"""

from wacs_options.version import __version__

__all__: list[str] = ["__version__"]
