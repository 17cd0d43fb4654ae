# ABOUTME: Allows running the weather card CLI with `python -m weather_card`.
# ABOUTME: Delegates to weather_card.cli.main.

import sys

from weather_card.cli import main

sys.exit(main())
