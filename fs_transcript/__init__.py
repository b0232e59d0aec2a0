"""fs_transcript package: rebuild a filesystem tree from a `cd`/`ls` transcript
and report directory-size statistics over it.
"""

__version__ = "0.1.0"

__all__: list[str] = []
