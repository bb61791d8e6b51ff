#  Copyright (c) 2025 Tom Villani, Ph.D.

"""``python -m md2docx``, the same command line as the ``md2docx`` script.

    python -m md2docx convert notes.md -o notes.docx
    python -m md2docx styles template.docx --rich
"""

import sys

from md2docx.cli import main

sys.exit(main())
