"""
wof_folders: rebuild the Who's On First place hierarchy as a folder plan.

The hierarchy engine lives in ``wof_folders.hierarchy``; ``wof_folders.cli``
exposes it as the ``wof-folders`` command.
"""

__version__ = "0.1.0"
