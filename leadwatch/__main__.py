"""Allows running Lead Watch with ``python -m leadwatch``."""

import sys

from leadwatch.lead_watch import main

sys.exit(main())
