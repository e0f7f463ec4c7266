"""
fieldprint: a print-specification compiler for awk.

Turns terse command-line field specifications such as ``1 -1 %{2:}`` into
an awk program and runs awk with it.

PIPELINE:
---------
    argv -> partition -> tokenize -> compile -> assemble -> execute

Each stage lives in its own module and knows nothing about the stages
after it. Only ``backends`` knows the awk language, and only ``executor``
knows how to launch a process.
"""

__version__ = "0.1.0"
