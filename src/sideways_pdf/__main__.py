"""Allow ``python -m sideways_pdf``."""

from sideways_pdf.cli import main

raise SystemExit(main())
