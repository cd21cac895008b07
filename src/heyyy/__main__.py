from __future__ import annotations

import sys

from heyyy.cli import main

sys.exit(main())
